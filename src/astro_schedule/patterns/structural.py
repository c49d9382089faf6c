# src/astro_schedule/patterns/structural.py

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol

Emit = Callable[[str], None]


class PaymentProcessor(Protocol):
    def process_payment(self, amount: float) -> None: ...


# Third-party style gateways with their own method names.


class PayPal:
    def __init__(self, emit: Emit = print) -> None:
        self._emit = emit

    def send_payment(self, amount: float) -> None:
        self._emit(f"Processing payment of ${amount} through PayPal.")


class CreditCard:
    def __init__(self, emit: Emit = print) -> None:
        self._emit = emit

    def charge(self, amount: float) -> None:
        self._emit(f"Processing payment of ${amount} through Credit Card.")


# ---- Adapter ----


class PayPalAdapter:
    def __init__(self, paypal: PayPal) -> None:
        self._paypal = paypal

    def process_payment(self, amount: float) -> None:
        self._paypal.send_payment(amount)


class CreditCardAdapter:
    def __init__(self, card: CreditCard) -> None:
        self._card = card

    def process_payment(self, amount: float) -> None:
        self._card.charge(amount)


# ---- Facade ----


class CourseEnrollmentFacade:
    """One call hides the enrollment steps and the payment gateway in use."""

    def __init__(self, processor: PaymentProcessor, emit: Emit = print) -> None:
        self._processor = processor
        self._emit = emit

    def enroll_in_course(self, course_name: str, amount: float) -> None:
        self._emit(f"Enrolling in course: {course_name}")
        self._processor.process_payment(amount)
        self._emit(f"Successfully enrolled in {course_name}.")


def run_demo(emit: Emit = print) -> None:
    emit("===== Adapter Pattern Example =====")
    paypal = PayPalAdapter(PayPal(emit))
    card = CreditCardAdapter(CreditCard(emit))
    paypal.process_payment(99.99)
    card.process_payment(49.99)

    emit("")
    emit("===== Facade Pattern Example =====")
    CourseEnrollmentFacade(paypal, emit).enroll_in_course("Python Programming", 99.99)
    emit("")
    CourseEnrollmentFacade(card, emit).enroll_in_course("Design Patterns", 49.99)
