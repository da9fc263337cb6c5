"""Tests for the Strategy examples."""

import json

import pytest

from design_patterns.domain.core.exceptions import (
    ResourceNotFoundError,
    UnknownPaymentMethodError,
)
from design_patterns.patterns.behavioral.strategy import conceptual, real_world


class TestStrategyConceptual:
    """Test swapping sorting strategies."""

    def test_main_output(self, capsys):
        """Test normal and reverse sorting."""
        conceptual.main()

        assert capsys.readouterr().out == (
            "Client: Strategy is set to normal sorting.\n"
            "Context: Sorting data using the strategy (not sure how it'll do it)\n"
            "a,b,c,d,e\n"
            "\n"
            "Client: Strategy is set to reverse sorting.\n"
            "Context: Sorting data using the strategy (not sure how it'll do it)\n"
            "e,d,c,b,a\n"
        )


class TestOrderController:
    """Test payment strategies behind the order controller."""

    def _controller(self):
        controller = real_world.OrderController()
        controller.post("/orders", {"email": "me@example.com", "product": "Food", "total": 9.95})
        return controller

    def test_post_creates_order(self, capsys):
        """Test orders get sequential ids and keep their attributes."""
        controller = self._controller()

        order = controller.get_order(0)
        assert order.status == "new"
        assert order.email == "me@example.com"
        assert order.to_dict() == {
            "id": 0, "status": "new", "email": "me@example.com", "product": "Food", "total": 9.95,
        }

    def test_order_attribute_error(self, capsys):
        """Test a missing attribute raises AttributeError."""
        order = self._controller().get_order(0)

        with pytest.raises(AttributeError):
            order.missing

    def test_payment_factory(self):
        """Test method ids map to strategies."""
        assert isinstance(real_world.PaymentFactory.get_payment_method("cc"),
                          real_world.CreditCardPayment)
        assert isinstance(real_world.PaymentFactory.get_payment_method("paypal"),
                          real_world.PayPalPayment)
        with pytest.raises(UnknownPaymentMethodError):
            real_world.PaymentFactory.get_payment_method("bitcoin")

    def test_credit_card_return_completes_order(self, capsys):
        """Test a valid credit card return."""
        controller = self._controller()
        order = controller.get_order(0)
        key = real_world.CreditCardPayment.payment_key(order)

        controller.get(f"/order/0/payment/cc/return?key={key}&success=true&total=9.95")

        assert order.status == "completed"
        assert capsys.readouterr().out.endswith(
            "CreditCardPayment: ...validating... Done!\n"
            "Controller: Thanks for your order!\n"
            "Order: #0 is now completed.\n"
        )

    @pytest.mark.parametrize("query, message", [
        ("key=wrong&success=true&total=9.95", "Payment key is wrong."),
        ("key={key}&success=false&total=9.95", "Payment failed."),
        ("key={key}&success=true&total=1.00", "Payment amount is wrong."),
    ])
    def test_credit_card_return_rejected(self, capsys, query, message):
        """Test invalid credit card returns are reported and leave the order open."""
        controller = self._controller()
        order = controller.get_order(0)
        key = real_world.CreditCardPayment.payment_key(order)

        controller.get(f"/order/0/payment/cc/return?{query.format(key=key)}")

        assert order.status == "new"
        assert capsys.readouterr().out.endswith(f"Controller: got an exception ({message})\n")

    def test_payment_form(self, capsys):
        """Test the PayPal form for an order."""
        controller = self._controller()

        controller.get("/order/0/payment/paypal")

        out = capsys.readouterr().out
        assert "Controller: here's the payment form:\n" in out
        assert '<form action="https://paypal.com/payment" method="POST">' in out
        assert 'value="https://our-website.com/order/0/payment/paypal/return"' in out

    def test_unknown_order(self, capsys):
        """Test paying for an order that does not exist."""
        with pytest.raises(ResourceNotFoundError):
            self._controller().get("/order/5/payment/paypal")

    def test_unknown_route(self, capsys):
        """Test the 404 page."""
        controller = self._controller()
        controller.get("/nowhere")
        controller.post("/nowhere", {})

        assert capsys.readouterr().out.count("Controller: 404 page") == 2

    def test_list_orders(self, capsys):
        """Test orders are dumped as indented JSON."""
        controller = self._controller()
        capsys.readouterr()

        controller.get("/orders")

        out = capsys.readouterr().out
        assert out.startswith("Controller: GET request to /orders\nController: Here's all orders:\n")
        assert json.loads(out.split("Here's all orders:\n", 1)[1])["product"] == "Food"

    def test_main_output(self, capsys):
        """Test the whole shopping session."""
        real_world.main()

        out = capsys.readouterr().out
        assert "Controller: Created the order #0." in out
        assert "Controller: Created the order #1." in out
        assert out.endswith(
            "PayPalPayment: ...validating... Done!\n"
            "Controller: Thanks for your order!\n"
            "Order: #1 is now completed.\n"
        )
