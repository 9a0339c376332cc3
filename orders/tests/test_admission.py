import threading
from unittest import mock

from django.db import OperationalError, close_old_connections, connection
from django.test import TestCase, TransactionTestCase, override_settings

from orders.exceptions import CapacityExceeded, OrderTemporarilyUnavailable
from orders.models import Order, OrderKind
from orders.payloads import (
    KIND_COLUMNS,
    ChristmasSweetsDetails,
    ChristmasTastingDetails,
    RegularDetails,
    WeddingTastingDetails,
)
from orders.services.admission import admit_order, capacity_info, generate_order_number

from .utils import contact, future


class AdmissionTests(TestCase):
    def test_capacity_two_admits_two_of_three(self):
        details = WeddingTastingDetails(cake_box=True, sweetbar_box=False)
        admit_order(contact(email="a@example.com"), details, future(7), capacity=2)
        admit_order(contact(email="b@example.com"), details, future(7), capacity=2)

        with self.assertRaises(CapacityExceeded) as ctx:
            admit_order(contact(email="c@example.com"), details, future(7), capacity=2)

        self.assertEqual(ctx.exception.capacity, 2)
        self.assertEqual(ctx.exception.status_code, 409)
        self.assertEqual(Order.objects.of_kind(OrderKind.WEDDING_TASTING).count(), 2)

    def test_capacity_counts_only_the_same_kind(self):
        for _ in range(3):
            admit_order(contact(), RegularDetails(order_cake=False, order_dessert=True, dessert_choice="Makronky"), future(8))
        order = admit_order(contact(), WeddingTastingDetails(cake_box=True, sweetbar_box=True), future(7), capacity=1)
        self.assertEqual(order.order_kind, OrderKind.WEDDING_TASTING)

    @override_settings(ORDER_KIND_CAPACITY={"wedding_tasting": 1})
    def test_capacity_defaults_to_settings(self):
        details = WeddingTastingDetails(cake_box=False, sweetbar_box=True)
        admit_order(contact(), details, future(7))
        with self.assertRaises(CapacityExceeded):
            admit_order(contact(), details, future(7))

    @override_settings(ORDER_KIND_CAPACITY={})
    def test_unlimited_kind_never_rejects(self):
        details = WeddingTastingDetails(cake_box=True, sweetbar_box=False)
        for _ in range(5):
            admit_order(contact(), details, future(7))
        info = capacity_info(OrderKind.WEDDING_TASTING)
        self.assertEqual(info.current, 5)
        self.assertIsNone(info.max)
        self.assertIsNone(info.remaining)
        self.assertTrue(info.is_available)

    def test_retries_then_gives_up(self):
        details = WeddingTastingDetails(cake_box=True, sweetbar_box=False)
        with mock.patch(
            "orders.services.admission.insert_order",
            side_effect=OperationalError("could not serialize access"),
        ) as insert:
            with self.assertRaises(OrderTemporarilyUnavailable) as ctx:
                admit_order(contact(), details, future(7), attempts=3)
        self.assertEqual(insert.call_count, 3)
        self.assertEqual(ctx.exception.code, "try_again_later")
        self.assertFalse(Order.objects.exists())

    def test_capacity_exceeded_is_not_retried(self):
        details = WeddingTastingDetails(cake_box=True, sweetbar_box=False)
        with mock.patch(
            "orders.services.admission.insert_order",
            side_effect=CapacityExceeded("wedding_tasting", 1),
        ) as insert:
            with self.assertRaises(CapacityExceeded):
                admit_order(contact(), details, future(7))
        self.assertEqual(insert.call_count, 1)

    def test_order_number_format(self):
        number = generate_order_number("WEDDING")
        prefix, millis, suffix = number.split("-")
        self.assertEqual(prefix, "WEDDING")
        self.assertTrue(millis.isdigit())
        self.assertEqual(len(suffix), 3)


class KindColumnsRoundTripTests(TestCase):
    def _assert_only(self, order, populated):
        blank = {"order_cake": False, "order_dessert": False}
        for col in KIND_COLUMNS:
            if col in populated:
                continue
            self.assertEqual(getattr(order, col), blank.get(col), col)

    def test_regular_cake_only(self):
        details = RegularDetails(
            order_cake=True,
            order_dessert=False,
            cake_size="Velký",
            cake_flavor="Čokoláda",
            cake_message="Všechno nejlepší",
            dessert_choice="ignored",
        )
        order = admit_order(contact(), details, future(9))
        order.refresh_from_db()

        self.assertTrue(order.order_number.startswith("ORD-"))
        self.assertEqual(order.cake_size, "Velký")
        self.assertIsNone(order.dessert_choice)
        self._assert_only(order, {"order_cake", "cake_size", "cake_flavor", "cake_message"})
        self.assertEqual(order.details, RegularDetails(True, False, "Velký", "Čokoláda", "Všechno nejlepší", None))

    def test_wedding_tasting(self):
        order = admit_order(contact(), WeddingTastingDetails(cake_box=True, sweetbar_box=False), future(7))
        order.refresh_from_db()
        self.assertTrue(order.order_number.startswith("WEDDING-"))
        self.assertEqual(order.tasting_cake_box_qty, 1)
        self._assert_only(order, {"tasting_cake_box_qty"})
        self.assertEqual(order.details, WeddingTastingDetails(cake_box=True, sweetbar_box=False))

    def test_christmas_sweets(self):
        details = ChristmasSweetsDetails.from_quantities({"vanilkove-rohlicky": 3, "pernicky": 2, "vosi-hnizda": 0})
        order = admit_order(contact(), details, future(30))
        order.refresh_from_db()
        self.assertTrue(order.order_number.startswith("XMAS-"))
        self.assertEqual([item["sweet_id"] for item in order.sweets_items], ["vanilkove-rohlicky", "pernicky"])
        self.assertEqual(order.total_amount, 540)
        self._assert_only(order, {"sweets_items", "total_amount"})
        self.assertEqual(order.details, details)

    def test_christmas_tasting(self):
        details = ChristmasTastingDetails(cake_box_qty=2, sweetbar_box_qty=0, notes="Bez ořechů")
        order = admit_order(contact(), details, future(4))
        order.refresh_from_db()
        self.assertTrue(order.order_number.startswith("XTASTE-"))
        self.assertEqual(order.total_amount, 900)
        self._assert_only(order, {"tasting_cake_box_qty", "tasting_sweetbar_box_qty", "tasting_notes", "total_amount"})
        self.assertEqual(order.details, details)


# SQLite has no row locks; its single writer lock plus retries must give the same outcome.
RETRY_BUDGET = 50


class ConcurrentAdmissionTests(TransactionTestCase):
    def test_concurrent_submissions_never_exceed_capacity(self):
        capacity, submissions = 3, 8
        details = WeddingTastingDetails(cake_box=True, sweetbar_box=False)
        start = threading.Barrier(submissions)
        outcomes = []
        lock = threading.Lock()

        def submit(i):
            try:
                start.wait()
                try:
                    admit_order(
                        contact(email=f"guest{i}@example.com"),
                        details,
                        future(7),
                        capacity=capacity,
                        attempts=RETRY_BUDGET,
                    )
                    result = "admitted"
                except CapacityExceeded:
                    result = "full"
                except OrderTemporarilyUnavailable:
                    result = "retry"
                with lock:
                    outcomes.append(result)
            finally:
                close_old_connections()
                connection.close()

        threads = [threading.Thread(target=submit, args=(i,)) for i in range(submissions)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        self.assertEqual(len(outcomes), submissions)
        self.assertEqual(outcomes.count("admitted"), capacity)
        self.assertEqual(outcomes.count("full"), submissions - capacity)
        self.assertEqual(Order.objects.of_kind(OrderKind.WEDDING_TASTING).count(), capacity)
