"""
Receipt page parsing
Pulls the chip application ID and cardholder name out of a Square receipt
"""

import logging
import re
from typing import Optional

from bs4 import BeautifulSoup

from square_connect.models.receipt_info import ReceiptInfo


logger = logging.getLogger(__name__)

AID_CLASS = "chip-application-id"
NAME_ON_CARD_CLASS = "name_on_card"

AID_PATTERN = re.compile(r"AID: ([A-Z]\d+)")


def _class_text(soup: BeautifulSoup, class_name: str) -> Optional[str]:
    """Concatenated text of every element carrying class_name, None if there are none"""
    elements = soup.find_all(class_=class_name)
    if not elements:
        return None
    return "".join(element.get_text() for element in elements)


def parse_receipt_html(html: str) -> ReceiptInfo:
    """
    Extract receipt info from a rendered receipt page

    Missing elements or a chip ID that does not look like ``AID: A123``
    leave the corresponding field as None. This never raises on content.

    Args:
        html: Receipt page markup

    Returns:
        ReceiptInfo with whichever fields could be found
    """
    soup = BeautifulSoup(html or "", "html.parser")

    aid = None
    chip_text = _class_text(soup, AID_CLASS)
    if chip_text is not None:
        match = AID_PATTERN.search(chip_text)
        if match:
            aid = match.group(1)
        else:
            logger.debug("No AID found in chip application text")

    name_on_card = _class_text(soup, NAME_ON_CARD_CLASS)
    if name_on_card is None:
        logger.debug("Receipt has no name_on_card element")

    return ReceiptInfo(aid=aid, name_on_card=name_on_card)
