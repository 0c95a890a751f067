"""
Signup form validation

Checks a self-service signup form before it is sent to the platform.
Rules run in order and the first failing rule's message is reported.
"""

from pydantic import BaseModel

from src.models.platform import SignupInput

MIN_PASSWORD_LENGTH = 8


class SignupForm(BaseModel):
    """Raw signup form as entered by the user."""

    organization_name: str = ""
    email: str = ""
    first_name: str = ""
    last_name: str = ""
    phone_number: str = ""
    emirate: str = ""
    password: str = ""
    confirm_password: str = ""
    agree_to_terms: bool = False
    agree_to_marketing: bool = False


def validate_signup_form(form: SignupForm) -> str | None:
    """Return the first validation error, or None when the form is valid."""
    if not form.organization_name.strip():
        return "Organization name is required"
    if not form.email.strip() or "@" not in form.email:
        return "Valid email is required"
    if not form.first_name.strip() or not form.last_name.strip():
        return "First and last name are required"
    if len(form.password) < MIN_PASSWORD_LENGTH:
        return f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
    if form.password != form.confirm_password:
        return "Passwords do not match"
    if not form.agree_to_terms:
        return "You must agree to the Terms of Service"
    return None


def to_signup_input(form: SignupForm) -> SignupInput:
    """Build the platform payload; blank optional fields are omitted."""
    return SignupInput(
        organization_name=form.organization_name,
        email=form.email,
        first_name=form.first_name,
        last_name=form.last_name,
        phone_number=form.phone_number or None,
        emirate=form.emirate or None,
        password=form.password,
        agree_to_marketing=form.agree_to_marketing,
    )
