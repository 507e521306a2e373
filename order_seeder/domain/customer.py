"""
Customer Domain Models

Customers are read from Shopify and never mutated. Addresses are either
copied from a customer's default address or synthesized (see
order_seeder.services.attribute_generator).

Author: TM3
Date: 2025-10-17
"""
from pydantic import BaseModel, Field, ConfigDict
from typing import Optional


class Address(BaseModel):
    """
    Mailing address - mirrors Shopify's MailingAddress / MailingAddressInput

    Fields:
        address1: Street line
        address2: Second street line (apartment, suite)
        city: City name
        province: State / province name
        province_code: State / province code (e.g. "CA")
        zip: Postal code
        country: Country name
        country_code: ISO country code (e.g. "US")
        phone: Phone number
        first_name: Recipient first name
        last_name: Recipient last name
        company: Company name
    """

    address1: Optional[str] = Field(None, description="Street line")
    address2: Optional[str] = Field(None, description="Second street line")
    city: Optional[str] = Field(None, description="City")
    province: Optional[str] = Field(None, description="State / province name")
    province_code: Optional[str] = Field(None, alias="provinceCode", description="State / province code")
    zip: Optional[str] = Field(None, description="Postal code")
    country: Optional[str] = Field(None, description="Country name")
    country_code: Optional[str] = Field(None, alias="countryCode", description="ISO country code")
    phone: Optional[str] = Field(None, description="Phone number")
    first_name: Optional[str] = Field(None, alias="firstName", description="Recipient first name")
    last_name: Optional[str] = Field(None, alias="lastName", description="Recipient last name")
    company: Optional[str] = Field(None, description="Company")

    model_config = ConfigDict(populate_by_name=True)

    def to_input(self) -> dict:
        """Serialize as a GraphQL MailingAddressInput (camelCase, no nulls)"""
        return self.model_dump(by_alias=True, exclude_none=True)


class Customer(BaseModel):
    """Customer as returned by the `customers` query"""

    id: str = Field(..., description="Shopify GID (gid://shopify/Customer/...)")
    first_name: Optional[str] = Field(None, alias="firstName")
    last_name: Optional[str] = Field(None, alias="lastName")
    email: Optional[str] = Field(None)
    default_address: Optional[Address] = Field(None, alias="defaultAddress")

    model_config = ConfigDict(populate_by_name=True)

    @property
    def full_name(self) -> str:
        return f"{self.first_name or ''} {self.last_name or ''}".strip()
