"""Strategy - real-world example: payment methods in an online shop.

The order controller handles payments through the ``PaymentMethod``
interface; ``PaymentFactory`` picks the credit card or PayPal strategy from
the URL.
"""

import hashlib
import json
import re
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional
from urllib.parse import parse_qs, urlparse

from design_patterns.domain.core.exceptions import (
    PaymentValidationError,
    ResourceNotFoundError,
    UnknownPaymentMethodError,
    ValidationError,
)

ORDERS_RE = re.compile(r"^/orders?$")
PAYMENT_RE = re.compile(r"^/order/([0-9]+?)/payment/([a-z]+?)(/return)?$")


class Order:
    def __init__(self, order_id: int, attributes: Dict[str, Any]):
        self.id = order_id
        self.status = "new"
        self.attributes = dict(attributes)

    def __getattr__(self, name: str) -> Any:
        try:
            return self.__dict__["attributes"][name]
        except KeyError:
            raise AttributeError(name) from None

    def complete(self) -> None:
        self.status = "completed"
        print(f"Order: #{self.id} is now {self.status}.")

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "status": self.status, **self.attributes}


class PaymentMethod(ABC):
    @abstractmethod
    def get_payment_form(self, order: Order) -> str:
        pass

    @abstractmethod
    def validate_return(self, order: Order, data: Dict[str, str]) -> bool:
        pass


class CreditCardPayment(PaymentMethod):
    store_secret_key = "swordfish"

    def get_payment_form(self, order: Order) -> str:
        return_url = f"https://our-website.com/order/{order.id}/payment/cc/return"

        return (
            '<form action="https://my-credit-card-processor.com/charge" method="POST">\n'
            f'    <input type="hidden" id="email" value="{order.email}">\n'
            f'    <input type="hidden" id="total" value="{order.total}">\n'
            f'    <input type="hidden" id="returnURL" value="{return_url}">\n'
            '    <input type="text" id="cardholder-name">\n'
            '    <input type="text" id="credit-card">\n'
            '    <input type="text" id="expiration-date">\n'
            '    <input type="text" id="ccv-number">\n'
            '    <input type="submit" value="Pay">\n'
            "</form>"
        )

    @classmethod
    def payment_key(cls, order: Order) -> str:
        return hashlib.md5(f"{order.id}{cls.store_secret_key}".encode("utf-8")).hexdigest()

    def validate_return(self, order: Order, data: Dict[str, str]) -> bool:
        print("CreditCardPayment: ...validating... ", end="")

        if data.get("key") != self.payment_key(order):
            raise PaymentValidationError("Payment key is wrong.")

        if data.get("success") in (None, "", "0", "false"):
            raise PaymentValidationError("Payment failed.")

        try:
            total = float(data.get("total", 0))
        except ValueError:
            raise PaymentValidationError("Payment amount is wrong.") from None
        if total < order.total:
            raise PaymentValidationError("Payment amount is wrong.")

        print("Done!")
        return True


class PayPalPayment(PaymentMethod):
    def get_payment_form(self, order: Order) -> str:
        return_url = f"https://our-website.com/order/{order.id}/payment/paypal/return"

        return (
            '<form action="https://paypal.com/payment" method="POST">\n'
            f'    <input type="hidden" id="email" value="{order.email}">\n'
            f'    <input type="hidden" id="total" value="{order.total}">\n'
            f'    <input type="hidden" id="returnURL" value="{return_url}">\n'
            '    <input type="submit" value="Pay on PayPal">\n'
            "</form>"
        )

    def validate_return(self, order: Order, data: Dict[str, str]) -> bool:
        print("PayPalPayment: ...validating... ", end="")
        # PayPal's verification call would go here.
        print("Done!")
        return True


class PaymentFactory:
    @staticmethod
    def get_payment_method(method_id: str) -> PaymentMethod:
        if method_id == "cc":
            return CreditCardPayment()
        elif method_id == "paypal":
            return PayPalPayment()
        raise UnknownPaymentMethodError(method_id)


class OrderController:
    """The context: routes requests and delegates payments to a strategy."""

    def __init__(self):
        self.orders: Dict[int, Order] = {}

    def get_order(self, order_id: Optional[int] = None):
        if order_id is None:
            return list(self.orders.values())
        if order_id not in self.orders:
            raise ResourceNotFoundError("Order", str(order_id))
        return self.orders[order_id]

    def post(self, url: str, data: Dict[str, Any]) -> None:
        print(f"Controller: POST request to {url} with {json.dumps(data)}")

        path = urlparse(url).path

        if ORDERS_RE.match(path):
            self.post_new_order(data)
        else:
            print("Controller: 404 page")

    def get(self, url: str) -> None:
        print(f"Controller: GET request to {url}")

        parsed = urlparse(url)
        data = {key: values[-1] for key, values in parse_qs(parsed.query).items()}

        payment = PAYMENT_RE.match(parsed.path)
        if ORDERS_RE.match(parsed.path):
            self.get_all_orders()
        elif payment:
            order = self.get_order(int(payment.group(1)))

            # The payment method (strategy) is selected from the URL.
            payment_method = PaymentFactory.get_payment_method(payment.group(2))

            if payment.group(3) is None:
                self.get_payment(payment_method, order, data)
            else:
                self.get_payment_return(payment_method, order, data)
        else:
            print("Controller: 404 page")

    def post_new_order(self, data: Dict[str, Any]) -> None:
        order = Order(len(self.orders), data)
        self.orders[order.id] = order
        print(f"Controller: Created the order #{order.id}.")

    def get_all_orders(self) -> None:
        print("Controller: Here's all orders:")
        orders: List[Order] = self.get_order()
        for order in orders:
            print(json.dumps(order.to_dict(), indent=4))

    def get_payment(self, method: PaymentMethod, order: Order, data: Dict[str, str]) -> None:
        form = method.get_payment_form(order)
        print("Controller: here's the payment form:")
        print(form)

    def get_payment_return(self, method: PaymentMethod, order: Order, data: Dict[str, str]) -> None:
        try:
            if method.validate_return(order, data):
                print("Controller: Thanks for your order!")
                order.complete()
        except ValidationError as e:
            print(f"Controller: got an exception ({e})")


def main() -> None:
    controller = OrderController()

    print("Client: Let's create some orders")
    controller.post("/orders", {
        "email": "me@example.com",
        "product": "ABC Cat food (XL)",
        "total": 9.95,
    })
    controller.post("/orders", {
        "email": "me@example.com",
        "product": "XYZ Cat litter (XXL)",
        "total": 19.95,
    })

    print("\nClient: List my orders, please")
    controller.get("/orders")

    print("\nClient: I'd like to pay for the second, show me the payment form")
    controller.get("/order/1/payment/paypal")

    print("\nClient: ...pushes the Pay button...")
    print("\nClient: Oh, I'm redirected to the PayPal.")
    print("\nClient: ...pays on the PayPal...")
    print("\nClient: Alright, I'm back with you, guys.")

    controller.get("/order/1/payment/paypal/return"
                   "?key=c55a3964833a4b0fa4469ea94a057152&success=true&total=19.95")


if __name__ == "__main__":
    main()
