"""Pydantic request/response schemas for the Customer API."""

from __future__ import annotations

from pydantic import BaseModel, Field

# --- Request Schemas ---


class RegisterCustomerRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "customer_id": "ALFKI",
                    "company_name": "Alfreds Futterkiste",
                    "contact_name": "Maria Anders",
                    "contact_title": "Sales Representative",
                    "phone_number": "030-0074321",
                    "fax_number": "030-0076545",
                }
            ]
        }
    }

    customer_id: str = Field(..., max_length=255)
    company_name: str = Field(..., max_length=255)
    contact_name: str = Field(..., max_length=255)
    contact_title: str | None = Field(None, max_length=100)
    phone_number: str | None = Field(None, max_length=50)
    fax_number: str | None = Field(None, max_length=50)


class UpdateContactDetailsRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"phone_number": "030-0074321", "fax_number": None}]}}

    phone_number: str | None = Field(None, max_length=50)
    fax_number: str | None = Field(None, max_length=50)


class ChangeContactRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"contact_name": "Ana Trujillo", "contact_title": "Owner"}]}}

    contact_name: str = Field(..., max_length=255)
    contact_title: str | None = Field(None, max_length=100)


class RenameCompanyRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"company_name": "Alfreds Futterkiste GmbH"}]}}

    company_name: str = Field(..., max_length=255)


class RecordOrderRequest(BaseModel):
    model_config = {
        "json_schema_extra": {"examples": [{"unit_price": 18.0, "quantity": 12, "discount": 0.05, "freight": 29.46}]}
    }

    unit_price: float = Field(..., ge=0)
    quantity: int = Field(1, ge=1)
    discount: float = Field(0.0, ge=0, le=1)
    freight: float = Field(0.0, ge=0)


# --- Response Schemas ---


class CustomerIdResponse(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"customer_id": "ALFKI"}]}}

    customer_id: str


class OrderIdResponse(BaseModel):
    order_id: str


class CustomerSummaryResponse(BaseModel):
    customer_id: str
    company_name: str | None = None
    contact_name: str | None = None
    contact_title: str | None = None
    phone_number: str | None = None
    fax_number: str | None = None
    order_count: int = 0
    # Decimal rendered as a string to keep it exact on the wire
    total_income: str
    is_valid_for_registration: bool
    can_make_orders: bool


class ViolationSchema(BaseModel):
    rule: str
    field: str
    message: str


class ValidationReportResponse(BaseModel):
    rule_set: str
    is_valid: bool
    violations: list[ViolationSchema] = []


class StatusResponse(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"status": "ok"}]}}

    status: str = "ok"
