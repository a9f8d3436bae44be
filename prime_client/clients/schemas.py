import enum
from datetime import date, datetime
from typing import Optional

from pydantic import EmailStr, Field
from prime_client.common.schemas import CamelModel
from prime_client.common.validation import PhoneNumber


class InsuranceType(str, enum.Enum):
    LIFE = "LIFE"
    HEALTH = "HEALTH"
    AUTO = "AUTO"
    PROPERTY = "PROPERTY"
    BUSINESS = "BUSINESS"


class PolicyStatus(str, enum.Enum):
    ACTIVE = "ACTIVE"
    PENDING = "PENDING"
    EXPIRED = "EXPIRED"
    CANCELLED = "CANCELLED"
    RENEWED = "RENEWED"


class ClientRequest(CamelModel):
    """Schema for registering a new client."""

    name: str = Field(..., min_length=1)
    national_id: str
    email: Optional[EmailStr] = None
    phone_number: PhoneNumber
    address: Optional[str] = None
    location: str
    insurance_type: InsuranceType
    policy_number: Optional[str] = None
    policy_start_date: Optional[date] = None
    policy_end_date: Optional[date] = None
    premium_amount: Optional[float] = Field(default=None, ge=0)
    policy_status: Optional[PolicyStatus] = None


class ClientUpdate(CamelModel):
    """Partial update: only the fields that are set are sent."""

    name: Optional[str] = None
    national_id: Optional[str] = None
    email: Optional[EmailStr] = None
    phone_number: Optional[PhoneNumber] = None
    address: Optional[str] = None
    location: Optional[str] = None
    insurance_type: Optional[InsuranceType] = None
    policy_number: Optional[str] = None
    policy_start_date: Optional[date] = None
    policy_end_date: Optional[date] = None
    premium_amount: Optional[float] = Field(default=None, ge=0)
    policy_status: Optional[PolicyStatus] = None


class ClientResponse(CamelModel):
    id: int
    name: str
    national_id: str
    email: Optional[str] = None
    phone_number: str
    address: Optional[str] = None
    location: str
    insurance_type: InsuranceType
    policy_number: Optional[str] = None
    policy_start_date: Optional[date] = None
    policy_end_date: Optional[date] = None
    premium_amount: Optional[float] = None
    policy_status: Optional[PolicyStatus] = None

    # Agent information
    agent_id: int
    agent_first_name: str
    agent_last_name: str
    agent_email: str

    # Policy metrics as stored server-side
    days_until_expiration: Optional[int] = None
    is_expiring_soon: Optional[bool] = None
    total_premiums_paid: Optional[float] = None
    years_as_client: Optional[int] = None
    needs_renewal: Optional[bool] = None

    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def agent_full_name(self) -> str:
        return f"{self.agent_first_name} {self.agent_last_name}"


class PolicyMetrics(CamelModel):
    """Derived expiry and renewal state for one policy."""

    is_active: bool
    is_expired: bool
    days_remaining: int
    needs_renewal: bool
    is_expiring_soon: bool
