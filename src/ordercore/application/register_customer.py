"""Application service: Register Customer use case.

Passwords are hashed with passlib before they reach the domain; the
plain text is never stored.
"""

from __future__ import annotations

from passlib.context import CryptContext

from ordercore.domain.exceptions import ValidationError
from ordercore.domain.model.catalog import Customer
from ordercore.domain.repository.catalog_repository import CustomerRepository

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")

MIN_PASSWORD_LENGTH = 8


class RegisterCustomerHandler:

    def __init__(self, customer_repo: CustomerRepository) -> None:
        self._customer_repo = customer_repo

    def handle(
        self,
        first_name: str,
        last_name: str,
        email: str,
        password: str,
    ) -> Customer:
        if len(password or "") < MIN_PASSWORD_LENGTH:
            raise ValidationError(
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
            )
        if email and self._customer_repo.get_by_email(email.strip()) is not None:
            raise ValidationError(f"Email '{email.strip()}' is already registered")

        customer = Customer.create(
            customer_id=self._customer_repo.next_id(),
            first_name=first_name,
            last_name=last_name,
            email=email,
            password_hash=pwd_context.hash(password),
        )
        self._customer_repo.add(customer)
        return customer
