"""Shared PayPal schema types (money, subscriber, billing cycle, ...).

Field names follow the provider's snake_case JSON, so no aliases are needed.
Everything optional defaults to None and is dropped on serialization.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import BaseModel


class ShippingPreference(str, Enum):
    GET_FROM_FILE = "GET_FROM_FILE"
    NO_SHIPPING = "NO_SHIPPING"
    SET_PROVIDED_ADDRESS = "SET_PROVIDED_ADDRESS"


class UserAction(str, Enum):
    CONTINUE = "CONTINUE"
    SUBSCRIBE_NOW = "SUBSCRIBE_NOW"


class PayeePreferred(str, Enum):
    UNRESTRICTED = "UNRESTRICTED"
    IMMEDIATE_PAYMENT_REQUIRED = "IMMEDIATE_PAYMENT_REQUIRED"


class TenureType(str, Enum):
    REGULAR = "REGULAR"
    TRIAL = "TRIAL"


class FrequencyInterval(str, Enum):
    DAY = "DAY"
    WEEK = "WEEK"
    MONTH = "MONTH"
    YEAR = "YEAR"


class Money(BaseModel):
    currency_code: str | None = None  # ISO-4217, e.g. USD
    value: str | None = None  # decimal string, e.g. "123.45"


class Name(BaseModel):
    prefix: str | None = None
    given_name: str | None = None
    surname: str | None = None
    middle_name: str | None = None
    suffix: str | None = None
    alternate_full_name: str | None = None
    full_name: str | None = None


class ShippingDetailName(BaseModel):
    full_name: str | None = None


class AddressPortable(BaseModel):
    address_line_1: str | None = None
    address_line_2: str | None = None
    admin_area_2: str | None = None  # city
    admin_area_1: str | None = None  # state / province
    postal_code: str | None = None
    country_code: str


class ShippingDetail(BaseModel):
    name: ShippingDetailName | None = None
    address: AddressPortable | None = None


class Subscriber(BaseModel):
    name: Name | None = None
    email_address: str | None = None
    payer_id: str | None = None  # read only
    shipping_address: ShippingDetail | None = None


class PaymentMethod(BaseModel):
    payer_selected: str | None = None  # default PAYPAL
    payee_preferred: PayeePreferred | None = None


class ApplicationContext(BaseModel):
    brand_name: str | None = None
    locale: str | None = None
    shipping_preference: ShippingPreference | None = None
    user_action: UserAction | None = None
    payment_method: PaymentMethod | None = None
    return_url: str
    cancel_url: str


class LinkDescription(BaseModel):
    href: str
    rel: str
    method: str | None = None


class CycleExecution(BaseModel):
    tenure_type: TenureType
    sequence: int
    cycles_completed: int
    cycles_remaining: int | None = None
    current_pricing_scheme_version: int | None = None
    total_cycles: int | None = None


class LastPaymentDetails(BaseModel):
    amount: Money | None = None
    time: datetime | None = None


class FailedPaymentDetails(BaseModel):
    amount: Money | None = None
    time: datetime | None = None
    reason_code: str | None = None  # PAYMENT_DENIED, COMPLIANCE_VIOLATION, ...
    next_payment_retry_time: datetime | None = None


class BillingInfo(BaseModel):
    outstanding_balance: Money | None = None
    cycle_executions: list[CycleExecution] | None = None
    last_payment: LastPaymentDetails | None = None
    next_billing_time: datetime | None = None
    final_payment_time: datetime | None = None
    failed_payments_count: int | None = None
    last_failed_payment: FailedPaymentDetails | None = None


class Frequency(BaseModel):
    interval_unit: FrequencyInterval
    interval_count: int | None = None  # default 1


class PricingScheme(BaseModel):
    version: int | None = None
    fixed_price: Money | None = None
    create_time: datetime | None = None
    update_time: datetime | None = None


class BillingCycle(BaseModel):
    pricing_scheme: PricingScheme | None = None
    frequency: Frequency
    tenure_type: TenureType
    sequence: int
    total_cycles: int | None = None  # 0 = infinite


class Taxes(BaseModel):
    percentage: str
    inclusive: bool = True


class PaymentPreferences(BaseModel):
    auto_bill_outstanding: bool = True
    setup_fee: Money | None = None
    setup_fee_failure_action: str | None = None  # CONTINUE or CANCEL
    payment_failure_threshold: int | None = None
