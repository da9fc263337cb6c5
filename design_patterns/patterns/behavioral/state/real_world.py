"""State - real-world example: the lifecycle of an invoice.

An invoice starts as a draft, becomes open when finalized, and ends up paid,
void or uncollectable. Each state allows only its own transitions; anything
else raises InvalidStateTransitionError.
"""

import json
from datetime import datetime
from typing import Any, Callable, Dict

from design_patterns.domain.core.exceptions import InvalidStateTransitionError


class InvoiceState:
    """Base state: every action is rejected unless a state allows it."""

    name = ""

    def __init__(self, invoice: "Invoice"):
        self.invoice = invoice

    def _reject(self, action: str) -> None:
        raise InvalidStateTransitionError(self.get_name(), action, "invoice")

    def finalize(self) -> None:
        self._reject("finalize")

    def pay(self) -> None:
        self._reject("pay")

    def cancel(self) -> None:
        self._reject("cancel")

    def void(self) -> None:
        self._reject("void")

    def get_name(self) -> str:
        return self.name


class DraftInvoiceState(InvoiceState):
    name = "draft"

    def finalize(self) -> None:
        print(f"Invoice #{self.invoice.id} finalized - changing from Draft to Open")
        self.invoice.set_state(OpenInvoiceState(self.invoice))


class OpenInvoiceState(InvoiceState):
    name = "open"

    def pay(self) -> None:
        print(f"Invoice #{self.invoice.id} paid - changing from Open to Paid")
        self.invoice.set_state(PaidInvoiceState(self.invoice))

    def void(self) -> None:
        print(f"Invoice #{self.invoice.id} voided - changing from Open to Void")
        self.invoice.set_state(VoidInvoiceState(self.invoice))

    def cancel(self) -> None:
        print(f"Invoice #{self.invoice.id} cancelled - changing from Open to Uncollectable")
        self.invoice.set_state(UncollectableInvoiceState(self.invoice))


class PaidInvoiceState(InvoiceState):
    name = "paid"


class VoidInvoiceState(InvoiceState):
    name = "void"


class UncollectableInvoiceState(InvoiceState):
    name = "uncollectable"

    def pay(self) -> None:
        print(f"Invoice #{self.invoice.id} paid - changing from Uncollectable to Paid")
        self.invoice.set_state(PaidInvoiceState(self.invoice))

    def void(self) -> None:
        print(f"Invoice #{self.invoice.id} voided - changing from Uncollectable to Void")
        self.invoice.set_state(VoidInvoiceState(self.invoice))


class Invoice:
    """The context; delegates every action to its current state."""

    def __init__(self, invoice_id: int, amount: float,
                 clock: Callable[[], datetime] = datetime.now):
        self.id = invoice_id
        self.amount = amount
        self.created_at = clock()
        self._state: InvoiceState = DraftInvoiceState(self)

    def set_state(self, state: InvoiceState) -> None:
        self._state = state

    def get_state(self) -> InvoiceState:
        return self._state

    def get_state_name(self) -> str:
        return self._state.get_name()

    def finalize(self) -> None:
        self._state.finalize()

    def pay(self) -> None:
        self._state.pay()

    def cancel(self) -> None:
        self._state.cancel()

    def void(self) -> None:
        self._state.void()

    def get_info(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "amount": self.amount,
            "state": self.get_state_name(),
            "created_at": self.created_at.strftime("%Y-%m-%d %H:%M:%S"),
        }


def _info(invoice: Invoice) -> str:
    return json.dumps(invoice.get_info(), separators=(",", ":"))


def main(clock: Callable[[], datetime] = datetime.now) -> None:
    print("=== Invoice State Pattern Demo ===\n")

    invoice = Invoice(1001, 1500.00, clock)
    print(f"Created invoice: {_info(invoice)}\n")

    print("--- Scenario 1: Draft -> Open -> Paid ---")
    invoice.finalize()
    print(f"Current state: {invoice.get_state_name()}")
    invoice.pay()
    print(f"Current state: {invoice.get_state_name()}")

    try:
        invoice.pay()
    except InvalidStateTransitionError as e:
        print(f"Expected error: {e}")

    print("\n--- Scenario 2: Draft -> Open -> Void ---")
    invoice2 = Invoice(1002, 750.00, clock)
    invoice2.finalize()
    invoice2.void()
    print(f"Invoice 2 state: {invoice2.get_state_name()}")

    print("\n--- Scenario 3: Draft -> Open -> Uncollectable -> Paid ---")
    invoice3 = Invoice(1003, 2000.00, clock)
    invoice3.finalize()
    invoice3.cancel()
    print(f"Invoice 3 state: {invoice3.get_state_name()}")
    invoice3.pay()
    print(f"Invoice 3 final state: {invoice3.get_state_name()}")

    print("\n--- Scenario 4: Draft -> Open -> Uncollectable -> Void ---")
    invoice4 = Invoice(1004, 500.00, clock)
    invoice4.finalize()
    invoice4.cancel()
    invoice4.void()
    print(f"Invoice 4 final state: {invoice4.get_state_name()}")

    print("\n--- Error Scenario: Invalid transition ---")
    invoice5 = Invoice(1005, 300.00, clock)
    try:
        invoice5.pay()
    except InvalidStateTransitionError as e:
        print(f"Expected error: {e}")

    print("\n--- State Information ---")
    for number, item in enumerate([invoice, invoice2, invoice3, invoice4, invoice5], start=1):
        print(f"Invoice {number}: {_info(item)}")


if __name__ == "__main__":
    main()
