"""Tests for the State examples."""

from datetime import datetime

import pytest

from design_patterns.domain.core.exceptions import InvalidStateTransitionError
from design_patterns.patterns.behavioral.state import conceptual, real_world


def fixed_clock():
    return datetime(2024, 1, 1, 10, 0, 0)


class TestStateConceptual:
    """Test the context switching states."""

    def test_main_output(self, capsys):
        """Test the transitions A -> B -> A."""
        conceptual.main()

        assert capsys.readouterr().out == (
            "Context: Transition to ConcreteStateA\n"
            "ConcreteStateA handles request1.\n"
            "ConcreteStateA wants to change the state of the context.\n"
            "Context: Transition to ConcreteStateB\n"
            "ConcreteStateB handles request2.\n"
            "ConcreteStateB wants to change the state of the context.\n"
            "Context: Transition to ConcreteStateA\n"
        )

    def test_state_knows_its_context(self, capsys):
        """Test the back reference set on transition."""
        context = conceptual.Context(conceptual.ConcreteStateB())

        assert context.state.context is context


class TestInvoiceLifecycle:
    """Test invoice states."""

    def _invoice(self):
        return real_world.Invoice(1, 10.0, fixed_clock)

    def test_draft_to_paid(self, capsys):
        """Test the normal payment path."""
        invoice = self._invoice()

        invoice.finalize()
        invoice.pay()

        assert invoice.get_state_name() == "paid"
        assert isinstance(invoice.get_state(), real_world.PaidInvoiceState)

    def test_uncollectable_can_still_be_paid_or_voided(self, capsys):
        """Test the transitions out of uncollectable."""
        paid, voided = self._invoice(), self._invoice()
        for invoice in (paid, voided):
            invoice.finalize()
            invoice.cancel()

        paid.pay()
        voided.void()

        assert paid.get_state_name() == "paid"
        assert voided.get_state_name() == "void"

    @pytest.mark.parametrize("action", ["pay", "cancel", "void"])
    def test_draft_rejects_everything_but_finalize(self, action):
        """Test invalid transitions from draft."""
        invoice = self._invoice()

        with pytest.raises(InvalidStateTransitionError) as exc_info:
            getattr(invoice, action)()

        assert str(exc_info.value) == f"Cannot {action} invoice in draft state"
        assert invoice.get_state_name() == "draft"

    @pytest.mark.parametrize("action", ["finalize", "pay", "cancel", "void"])
    def test_void_is_final(self, action, capsys):
        """Test a voided invoice accepts no action."""
        invoice = self._invoice()
        invoice.finalize()
        invoice.void()

        with pytest.raises(InvalidStateTransitionError):
            getattr(invoice, action)()

    def test_get_info(self):
        """Test the invoice summary."""
        assert self._invoice().get_info() == {
            "id": 1,
            "amount": 10.0,
            "state": "draft",
            "created_at": "2024-01-01 10:00:00",
        }

    def test_main_output(self, capsys):
        """Test the scenarios and the final summary."""
        real_world.main(fixed_clock)

        out = capsys.readouterr().out
        assert "Expected error: Cannot pay invoice in paid state\n" in out
        assert "Expected error: Cannot pay invoice in draft state\n" in out
        assert "Invoice 3 final state: paid\n" in out
        assert "Invoice 4 final state: void\n" in out
        assert out.endswith(
            'Invoice 5: {"id":1005,"amount":300.0,"state":"draft","created_at":"2024-01-01 10:00:00"}\n'
        )
