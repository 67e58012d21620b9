"""Receipt info model"""

from typing import Optional
from pydantic import BaseModel, Field


class ReceiptInfo(BaseModel):
    """Customer details scraped from a card payment receipt"""

    aid: Optional[str] = Field(
        None, alias="AID", description="EMV chip application ID, e.g. A0000000031010"
    )
    name_on_card: Optional[str] = Field(
        None, alias="nameOnCard", description="Cardholder name as printed on the receipt"
    )

    model_config = {
        "populate_by_name": True,
    }
