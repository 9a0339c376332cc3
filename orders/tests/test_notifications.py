from decimal import Decimal
from io import StringIO
from unittest import mock

from django.core import mail
from django.core.management import call_command
from django.core.management.base import CommandError
from django.test import TestCase, override_settings

from orders import catalog
from orders.models import EmailLog
from orders.payloads import ChristmasSweetsDetails, ChristmasTastingDetails, RegularDetails, WeddingTastingDetails
from orders.services.notifications import notify_order_submitted, payment_for

from .utils import make_order


@override_settings(ORDER_NOTIFICATION_RECIPIENTS=["bakery@example.com", "owner@example.com"])
class OrderNotificationTests(TestCase):
    def test_customer_input_is_escaped_in_html(self):
        order = make_order(
            RegularDetails(order_cake=True, order_dessert=False, cake_size="M", cake_flavor="Malina", cake_message="<b>Ahoj</b>"),
            customer_name="<script>x</script>",
        )
        result = notify_order_submitted(order)

        self.assertTrue(result.admin_sent)
        self.assertTrue(result.customer_sent)
        admin_mail = mail.outbox[0]
        self.assertEqual(admin_mail.to, ["bakery@example.com", "owner@example.com"])
        self.assertEqual(admin_mail.reply_to, ["jana@example.com"])
        html, mimetype = admin_mail.alternatives[0]
        self.assertEqual(mimetype, "text/html")
        self.assertIn("&lt;script&gt;", html)
        self.assertNotIn("<script>", html)
        self.assertIn("<b>Ahoj</b>", admin_mail.body)

    def test_christmas_confirmation_has_payment_instructions(self):
        order = make_order(
            ChristmasSweetsDetails.from_quantities({"vanilkove-rohlicky": 6}),
            delivery_date=catalog.CHRISTMAS_SWEETS_PLACEHOLDER_DATE,
        )
        notify_order_submitted(order)
        customer_mail = mail.outbox[1]
        self.assertIn("deposit of 450 CZK", customer_mail.body)
        self.assertIn("150", customer_mail.body)

    def test_admin_failure_does_not_block_customer_email(self):
        order = make_order()
        calls = {"n": 0}
        real_send = mail.EmailMultiAlternatives.send

        def flaky_send(msg, *args, **kwargs):
            calls["n"] += 1
            if calls["n"] == 1:
                raise ConnectionError("smtp timeout")
            return real_send(msg, *args, **kwargs)

        with mock.patch("orders.services.notifications.EmailMultiAlternatives.send", autospec=True, side_effect=flaky_send):
            result = notify_order_submitted(order)

        self.assertFalse(result.admin_sent)
        self.assertTrue(result.customer_sent)
        statuses = dict(EmailLog.objects.values_list("email_type", "status"))
        self.assertEqual(statuses[EmailLog.TYPE_ADMIN_NOTIFICATION], EmailLog.STATUS_FAILED)
        self.assertEqual(statuses[EmailLog.TYPE_CUSTOMER_CONFIRMATION], EmailLog.STATUS_SENT)


class PaymentDetailsTests(TestCase):
    def test_regular_orders_have_no_payment(self):
        self.assertIsNone(payment_for(make_order()))

    def test_wedding_tasting_pays_deposit(self):
        payment = payment_for(make_order(WeddingTastingDetails(cake_box=True, sweetbar_box=True)))
        self.assertTrue(payment.requires_deposit)
        self.assertEqual(payment.amount_due, Decimal(450))
        self.assertEqual(payment.balance_due, Decimal(850))

    def test_christmas_tasting_is_paid_in_full(self):
        payment = payment_for(make_order(ChristmasTastingDetails(cake_box_qty=0, sweetbar_box_qty=1)))
        self.assertFalse(payment.requires_deposit)
        self.assertEqual(payment.amount_due, Decimal(350))
        self.assertFalse(payment.has_balance)


class SendTestEmailCommandTests(TestCase):
    def test_sends_and_logs(self):
        out = StringIO()
        call_command("send_test_email", "qa@example.com", stdout=out)
        self.assertIn("OK", out.getvalue())
        self.assertEqual(mail.outbox[0].to, ["qa@example.com"])
        log = EmailLog.objects.get()
        self.assertEqual(log.email_type, EmailLog.TYPE_TEST)
        self.assertEqual(log.status, EmailLog.STATUS_SENT)

    def test_failure_raises_command_error(self):
        with mock.patch(
            "orders.services.notifications.EmailMultiAlternatives.send",
            side_effect=RuntimeError("bad api key"),
        ):
            with self.assertRaises(CommandError):
                call_command("send_test_email", "qa@example.com", stdout=StringIO())
        self.assertEqual(EmailLog.objects.get().status, EmailLog.STATUS_FAILED)
