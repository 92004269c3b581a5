import json
import re
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, field_validator, model_validator


# -------------------------
# PAYMENT MODELS
# -------------------------

class PaymentMethod(str, Enum):
    COD = "cod"
    CARD = "card"
    GCASH = "gcash"

    @property
    def label(self) -> str:
        return {
            PaymentMethod.COD: "Cash on Delivery",
            PaymentMethod.CARD: "Visa/Mastercard",
            PaymentMethod.GCASH: "GCash",
        }[self]


class CardDetails(BaseModel):
    cardNumber: str
    cardName: str
    expiryDate: str  # MM/YY
    cvv: str

    @field_validator("cardNumber")
    @classmethod
    def card_number_has_16_digits(cls, value: str) -> str:
        digits = re.sub(r"\s", "", value)
        if len(digits) != 16 or not digits.isdigit():
            raise ValueError("Please enter a valid 16-digit card number")
        return digits

    @field_validator("cardName")
    @classmethod
    def card_name_present(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Please enter the cardholder name")
        return value.strip()

    @field_validator("expiryDate")
    @classmethod
    def expiry_is_mm_yy(cls, value: str) -> str:
        if not re.fullmatch(r"(0[1-9]|1[0-2])/\d{2}", value):
            raise ValueError("Please enter a valid expiry date (MM/YY)")
        return value

    @field_validator("cvv")
    @classmethod
    def cvv_has_3_digits(cls, value: str) -> str:
        if len(value) < 3 or not value.isdigit():
            raise ValueError("Please enter a valid CVV")
        return value


class GcashDetails(BaseModel):
    gcashNumber: str
    gcashName: str

    @field_validator("gcashNumber")
    @classmethod
    def gcash_number_has_11_digits(cls, value: str) -> str:
        if len(value) != 11 or not value.isdigit():
            raise ValueError("Please enter a valid 11-digit GCash number")
        return value

    @field_validator("gcashName")
    @classmethod
    def gcash_name_present(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Please enter the account name")
        return value.strip()


# -------------------------
# CHECKOUT REQUEST
# -------------------------

class CheckoutRequest(BaseModel):
    """
    What the checkout screen submits. Serialised into the order's
    shipping_address column as:

    {
      "address": "...", "contact": "...", "notes": "...",
      "paymentMethod": "card",
      "paymentDetails": {"lastFourDigits": "1111"}
    }
    """
    address: str
    contact: str
    notes: str = ""
    paymentMethod: PaymentMethod = PaymentMethod.COD
    card: Optional[CardDetails] = None
    gcash: Optional[GcashDetails] = None

    @field_validator("address")
    @classmethod
    def address_present(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Please enter your shipping address")
        return value.strip()

    @field_validator("contact")
    @classmethod
    def contact_present(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Please enter your contact number")
        return value.strip()

    @model_validator(mode="after")
    def payment_details_match_method(self) -> "CheckoutRequest":
        if self.paymentMethod == PaymentMethod.CARD and self.card is None:
            raise ValueError("Card details are required for card payments")
        if self.paymentMethod == PaymentMethod.GCASH and self.gcash is None:
            raise ValueError("GCash details are required for GCash payments")
        return self

    def payment_details(self) -> Dict[str, Any]:
        """Only the partial payment details that are safe to keep on the order"""
        if self.paymentMethod == PaymentMethod.CARD:
            return {"lastFourDigits": self.card.cardNumber[-4:]}
        if self.paymentMethod == PaymentMethod.GCASH:
            return {"gcashNumber": self.gcash.gcashNumber}
        return {}

    def to_shipping_blob(self) -> str:
        return json.dumps({
            "address": self.address,
            "contact": self.contact,
            "notes": self.notes,
            "paymentMethod": self.paymentMethod.value,
            "paymentDetails": self.payment_details(),
        }, ensure_ascii=False)

    def payment_proof(self) -> str:
        # Online payments are recorded as paid; COD is settled on delivery
        return "" if self.paymentMethod == PaymentMethod.COD else "paid"


def parse_shipping_blob(raw: Optional[str]) -> Dict[str, Any]:
    """Decode an order's shipping_address column; malformed blobs give {}"""
    if not raw:
        return {}
    try:
        value = json.loads(raw)
        return value if isinstance(value, dict) else {}
    except ValueError:
        return {}
