import base64
import json
from datetime import timedelta

from django.test import Client, TestCase
from django.utils import timezone

from orders.models import BlockedDate, OrderPhoto
from orders.payloads import ChristmasTastingDetails, RegularDetails, WeddingTastingDetails

from .utils import future, make_order, make_staff


class AdminClientMixin:
    def setUp(self):
        self.admin = make_staff()
        self.client = Client()
        self.client.force_login(self.admin)

    def patch_json(self, url, data):
        return self.client.patch(url, data=json.dumps(data), content_type="application/json")


class MilestoneToggleTests(AdminClientMixin, TestCase):
    def test_paid_toggle_is_idempotent(self):
        order = make_order()

        first = self.patch_json(f"/api/orders/{order.pk}/paid", {"isPaid": True})
        self.assertEqual(first.status_code, 200, first.content)
        self.assertTrue(first.json()["changed"])
        order.refresh_from_db()
        paid_at = order.paid_at
        self.assertIsNotNone(paid_at)
        self.assertEqual(order.updated_by, self.admin)
        self.assertEqual(order.status, "paid")

        second = self.patch_json(f"/api/orders/{order.pk}/paid", {"isPaid": True})
        self.assertFalse(second.json()["changed"])
        order.refresh_from_db()
        self.assertEqual(order.paid_at, paid_at)

        self.patch_json(f"/api/orders/{order.pk}/paid", {"isPaid": False})
        order.refresh_from_db()
        self.assertIsNone(order.paid_at)
        self.assertEqual(order.status, "created")

    def test_delivered_without_paid(self):
        order = make_order()
        resp = self.patch_json(f"/api/orders/{order.pk}/delivered", {"isDelivered": True})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["order"]["status"], "delivered")

    def test_non_boolean_is_400(self):
        order = make_order()
        resp = self.patch_json(f"/api/orders/{order.pk}/paid", {"isPaid": "yes"})
        self.assertEqual(resp.status_code, 400)
        order.refresh_from_db()
        self.assertIsNone(order.paid_at)

    def test_non_object_body_is_400(self):
        order = make_order()
        resp = self.patch_json(f"/api/orders/{order.pk}/paid", [1])
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["error"], "isPaid must be a boolean")

    def test_unknown_order_is_404(self):
        resp = self.patch_json("/api/orders/999999/delivered", {"isDelivered": True})
        self.assertEqual(resp.status_code, 404)


class BlockedDateApiTests(AdminClientMixin, TestCase):
    def test_add_list_remove(self):
        day = future(20)
        added = self.client.post("/api/blocked-dates/add", {"date": day.isoformat()})
        self.assertEqual(added.status_code, 201, added.content)
        blocked_id = added.json()["blocked_date"]["id"]

        dup = self.client.post("/api/blocked-dates/add", {"date": day.isoformat()})
        self.assertEqual(dup.status_code, 400)

        listing = self.client.get("/api/admin/blocked-dates").json()
        self.assertEqual([row["date"] for row in listing], [day.isoformat()])
        self.assertEqual(listing[0]["created_by"]["email"], self.admin.email)

        removed = self.client.delete(
            "/api/blocked-dates/remove",
            data=json.dumps({"id": blocked_id}),
            content_type="application/json",
        )
        self.assertEqual(removed.status_code, 200)
        self.assertFalse(BlockedDate.objects.exists())

    def test_remove_unknown_is_404(self):
        resp = self.client.delete(
            "/api/blocked-dates/remove",
            data=json.dumps({"id": 12345}),
            content_type="application/json",
        )
        self.assertEqual(resp.status_code, 404)

    def test_add_requires_valid_date(self):
        resp = self.client.post("/api/blocked-dates/add", {"date": "24.12.2026"})
        self.assertEqual(resp.status_code, 400)
        self.assertIn("date", resp.json()["errors"])

    def test_list_is_newest_date_first(self):
        for offset in (5, 30, 12):
            BlockedDate.objects.create(date=future(offset), created_by=self.admin)
        dates = [row["date"] for row in self.client.get("/api/admin/blocked-dates").json()]
        self.assertEqual(dates, sorted(dates, reverse=True))


class AdminOrderQueryTests(AdminClientMixin, TestCase):
    def setUp(self):
        super().setUp()
        now = timezone.now()
        self.created = make_order(customer_name="Adam Novák", customer_email="adam@example.com", delivery_date=future(20))
        self.paid = make_order(
            WeddingTastingDetails(cake_box=True, sweetbar_box=False),
            customer_name="Bára Malá",
            customer_email="bara@example.com",
            delivery_date=future(8),
            paid_at=now,
        )
        self.delivered = make_order(
            ChristmasTastingDetails(cake_box_qty=1, sweetbar_box_qty=1),
            customer_name="Cyril Velký",
            customer_email="cyril@example.com",
            delivery_date=future(15),
            paid_at=now - timedelta(days=1),
            delivered_at=now,
        )

    def _list(self, **params):
        resp = self.client.get("/api/admin/orders", params)
        self.assertEqual(resp.status_code, 200, resp.content)
        return resp.json()

    def test_filter_by_status(self):
        for status, expected in (("created", self.created), ("paid", self.paid), ("delivered", self.delivered)):
            body = self._list(status=status)
            self.assertEqual(body["total"], 1, status)
            self.assertEqual(body["orders"][0]["order_number"], expected.order_number)

        self.assertEqual(self._list(status="all")["total"], 3)

    def test_search_is_case_insensitive(self):
        body = self._list(search="BARA@")
        self.assertEqual([o["order_number"] for o in body["orders"]], [self.paid.order_number])

        body = self._list(search=self.delivered.order_number.lower())
        self.assertEqual(body["total"], 1)

    def test_sort_by_delivery_date(self):
        body = self._list(sort="delivery_date", dir="asc")
        self.assertEqual(
            [o["order_number"] for o in body["orders"]],
            [self.paid.order_number, self.delivered.order_number, self.created.order_number],
        )

    def test_sort_by_status(self):
        body = self._list(sort="status", dir="asc")
        self.assertEqual([o["status"] for o in body["orders"]], ["created", "delivered", "paid"])

    def test_pagination(self):
        body = self._list(page=2, page_size=2, sort="customer_name", dir="asc")
        self.assertEqual(body["total"], 3)
        self.assertEqual(body["total_pages"], 2)
        self.assertEqual([o["customer_name"] for o in body["orders"]], ["Cyril Velký"])

        self.assertEqual(self._list(page_size=500)["page_size"], 100)

    def test_includes_photo_metadata(self):
        OrderPhoto.objects.create(
            order=self.created,
            original_name="dort.jpg",
            mime_type="image/jpeg",
            file_size=3,
            image_data=base64.b64encode(b"abc").decode(),
        )
        resp = self.client.get(f"/api/admin/orders/{self.created.order_number}")
        self.assertEqual(resp.status_code, 200)
        order = resp.json()["order"]
        self.assertEqual(order["photos"][0]["original_name"], "dort.jpg")
        self.assertNotIn("image_data", order["photos"][0])
        self.assertEqual(order["details"]["cake_size"], "M")

    def test_detail_unknown_is_404(self):
        self.assertEqual(self.client.get("/api/admin/orders/ORD-0-000").status_code, 404)

    def test_stats(self):
        resp = self.client.get("/api/admin/stats")
        self.assertEqual(resp.json(), {"total": 3, "created": 1, "paid": 1, "delivered": 1})


class PhotoViewTests(TestCase):
    def test_serves_decoded_image(self):
        order = make_order(RegularDetails(order_cake=False, order_dessert=True, dessert_choice="Větrníky"))
        raw = b"GIF89a" + b"\x00" * 10
        photo = OrderPhoto.objects.create(
            order=order,
            original_name="inspirace.gif",
            mime_type="image/gif",
            file_size=len(raw),
            image_data=base64.b64encode(raw).decode(),
        )

        resp = self.client.get(f"/photo/{photo.pk}")

        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.content, raw)
        self.assertEqual(resp["Content-Type"], "image/gif")
        self.assertEqual(resp["Content-Length"], str(len(raw)))
        self.assertEqual(resp["Cache-Control"], "public, max-age=31536000")
        self.assertEqual(resp["Content-Disposition"], 'inline; filename="inspirace.gif"')

    def test_missing_photo(self):
        self.assertEqual(self.client.get("/photo/424242").status_code, 404)
