"""FastAPI endpoints for the Customer aggregate."""

from fastapi import APIRouter, HTTPException
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from productify.api.schemas import (
    ChangeContactRequest,
    CustomerIdResponse,
    CustomerSummaryResponse,
    OrderIdResponse,
    RecordOrderRequest,
    RegisterCustomerRequest,
    RenameCompanyRequest,
    StatusResponse,
    UpdateContactDetailsRequest,
    ValidationReportResponse,
    ViolationSchema,
)
from productify.customer import persistence
from productify.customer.contact import ChangeContact, RenameCompany, UpdateContactDetails
from productify.customer.orders import RecordOrder
from productify.customer.registration import RegisterCustomer
from productify.customer.removal import DeleteCustomer
from productify.shared.errors import RuleSetNotFoundError
from productify.validation import IS_VALID_FOR_REGISTRATION, get_rule_set

router = APIRouter(prefix="/customers", tags=["customers"])


def _load_or_404(customer_id: str):
    try:
        return persistence.load(customer_id)
    except ObjectNotFoundError:
        raise HTTPException(status_code=404, detail=f"Customer {customer_id} not found") from None


def _amount(value) -> str:
    """Render a Decimal amount in plain notation without trailing zeros."""
    return format(value.normalize(), "f")


@router.post("", status_code=201, response_model=CustomerIdResponse)
async def register_customer(body: RegisterCustomerRequest) -> CustomerIdResponse:
    command = RegisterCustomer(
        customer_id=body.customer_id,
        company_name=body.company_name,
        contact_name=body.contact_name,
        contact_title=body.contact_title,
        phone_number=body.phone_number,
        fax_number=body.fax_number,
    )
    result = current_domain.process(command, asynchronous=False)
    return CustomerIdResponse(customer_id=result)


@router.get("/{customer_id}", response_model=CustomerSummaryResponse)
async def get_customer(customer_id: str) -> CustomerSummaryResponse:
    customer = _load_or_404(customer_id)
    contact = customer.contact_info
    return CustomerSummaryResponse(
        customer_id=str(customer.id),
        company_name=customer.name,
        contact_name=contact.contact_name if contact else None,
        contact_title=contact.contact_title if contact else None,
        phone_number=customer.phone_number,
        fax_number=customer.fax_number,
        order_count=len(customer.orders),
        total_income=_amount(customer.total_income()),
        is_valid_for_registration=customer.is_valid_for_registration,
        can_make_orders=customer.can_make_orders,
    )


@router.get("/{customer_id}/validation", response_model=ValidationReportResponse)
async def validate_customer(customer_id: str, rule_set: str = IS_VALID_FOR_REGISTRATION) -> ValidationReportResponse:
    customer = _load_or_404(customer_id)
    try:
        rules = get_rule_set(rule_set)
    except RuleSetNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from None

    result = rules.evaluate(customer)
    return ValidationReportResponse(
        rule_set=result.rule_set,
        is_valid=result.is_valid,
        violations=[ViolationSchema(rule=v.rule, field=v.field, message=v.message) for v in result.violations],
    )


@router.put("/{customer_id}/contact-details", response_model=StatusResponse)
async def update_contact_details(customer_id: str, body: UpdateContactDetailsRequest) -> StatusResponse:
    _load_or_404(customer_id)
    command = UpdateContactDetails(
        customer_id=customer_id,
        phone_number=body.phone_number,
        fax_number=body.fax_number,
    )
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@router.put("/{customer_id}/contact", response_model=StatusResponse)
async def change_contact(customer_id: str, body: ChangeContactRequest) -> StatusResponse:
    _load_or_404(customer_id)
    command = ChangeContact(
        customer_id=customer_id,
        contact_name=body.contact_name,
        contact_title=body.contact_title,
    )
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@router.put("/{customer_id}/name", response_model=StatusResponse)
async def rename_company(customer_id: str, body: RenameCompanyRequest) -> StatusResponse:
    _load_or_404(customer_id)
    current_domain.process(RenameCompany(customer_id=customer_id, company_name=body.company_name), asynchronous=False)
    return StatusResponse()


@router.post("/{customer_id}/orders", status_code=201, response_model=OrderIdResponse)
async def record_order(customer_id: str, body: RecordOrderRequest) -> OrderIdResponse:
    _load_or_404(customer_id)
    command = RecordOrder(
        customer_id=customer_id,
        unit_price=body.unit_price,
        quantity=body.quantity,
        discount=body.discount,
        freight=body.freight,
    )
    result = current_domain.process(command, asynchronous=False)
    return OrderIdResponse(order_id=result)


@router.delete("/{customer_id}", response_model=StatusResponse)
async def delete_customer(customer_id: str) -> StatusResponse:
    _load_or_404(customer_id)
    current_domain.process(DeleteCustomer(customer_id=customer_id), asynchronous=False)
    return StatusResponse()
