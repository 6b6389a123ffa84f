"""
WhatsApp click-to-chat links for the contact and program pages
"""
from typing import Optional
from urllib.parse import quote
import re

WHATSAPP_BASE_URL = "https://wa.me"

GENERAL_GREETING = "مرحباً، أريد الاستفسار عن خدماتكم"
PROGRAM_GREETING = "مرحباً، أريد الاستفسار عن البرنامج الدراسي: {program_name}"


def normalize_phone(phone: Optional[str]) -> str:
    """wa.me expects the international number as digits only"""
    return re.sub(r"\D", "", phone or "")


def build_whatsapp_link(phone: Optional[str], text: str = GENERAL_GREETING) -> Optional[str]:
    digits = normalize_phone(phone)
    if not digits:
        return None
    return f"{WHATSAPP_BASE_URL}/{digits}?text={quote(text, safe='')}"


def program_greeting(program_name: str) -> str:
    return PROGRAM_GREETING.format(program_name=program_name)
