# app/domain/schemas.py
from pydantic import AliasChoices, BaseModel, Field, ConfigDict, EmailStr, PlainSerializer, field_validator
from typing import Annotated, List
from decimal import Decimal
from datetime import datetime

# kwoty w JSON jako liczby, nie stringi
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class CamelModel(BaseModel):
    """Pola snake_case w Pythonie, camelCase na wejsciu i wyjsciu JSON."""

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)


class RegisterIn(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(..., min_length=8)

    @field_validator("password")
    @classmethod
    def password_has_letter_and_digit(cls, value: str) -> str:
        if not any(c.isalpha() for c in value) or not any(c.isdigit() for c in value):
            raise ValueError("password must contain at least 1 letter and 1 number")
        return value


class LoginIn(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=1)


class UserOut(CamelModel):
    id: int
    name: str
    email: str
    wallet_money: Money = Field(..., alias="walletMoney")
    address: str


class AddressIn(BaseModel):
    address: str = Field(..., min_length=20, max_length=500)


class AddressOut(BaseModel):
    address: str


class AccessToken(BaseModel):
    token: str
    expires: datetime


class TokensOut(BaseModel):
    access: AccessToken


class AuthOut(BaseModel):
    user: UserOut
    tokens: TokensOut


class ProductOut(CamelModel):
    id: int
    name: str
    category: str
    cost: Money
    rating: int
    image: str


class ItemIn(CamelModel):
    """Schema dla dodawania produktu do koszyka."""

    product_id: int = Field(..., gt=0, alias="productId")
    quantity: int = Field(..., gt=0)


class ItemUpdateIn(CamelModel):
    """Zmiana ilosci, 0 usuwa produkt z koszyka."""

    product_id: int = Field(..., gt=0, alias="productId")
    quantity: int = Field(..., ge=0)


class ItemDeleteIn(CamelModel):
    product_id: int = Field(..., gt=0, alias="productId")


class CartItemOut(CamelModel):
    product: ProductOut
    quantity: int


class CartOut(CamelModel):
    email: str
    cart_items: List[CartItemOut] = Field(
        default_factory=list,
        validation_alias=AliasChoices("items", "cartItems"),
        serialization_alias="cartItems",
    )
    payment_option: str = Field(..., alias="paymentOption")
