#!/usr/bin/env python3
"""Smoke-test a running server through FormClient.

Usage:
  uvicorn techhub.main:app --port 8000
  python3 scripts/smoke_forms.py [base_url]
"""

from __future__ import annotations

import asyncio
import sys
from datetime import date, timedelta
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from techhub.client.form_client import FormClient

BASE_URL = "http://127.0.0.1:8000"


def next_weekday(start: date) -> date:
    day = start + timedelta(days=1)
    while day.weekday() >= 5:
        day += timedelta(days=1)
    return day


async def main(base_url: str) -> int:
    client = FormClient(base_url)
    visit_day = next_weekday(date.today()).isoformat()

    slots = await client.available_slots(visit_day)
    print(f"Slots on {visit_day}: available={slots['availableSlots']} booked={slots['bookedSlots']}")
    if not slots["availableSlots"]:
        print("No free slot to book")
        return 1

    booking = {
        "name": "Ama Mensah",
        "email": "ama@example.com",
        "phone": "024-429-9095",
        "date": visit_day,
        "time": slots["availableSlots"][0],
        "purpose": "facility-tour",
        "guests": 2,
        "message": "Looking forward to the tour.",
    }
    result = await client.submit_booking(booking)
    if result.success:
        print(f"Booked: {result.data['bookingId']}")
    else:
        print(f"Booking failed: {result.error.kind} {result.error.code} - {result.error.user_message}")

    again = await client.submit_booking(booking)
    print(f"Second attempt for the same slot: success={again.success} code={again.error.code if again.error else None}")

    contact = await client.submit_contact(
        {
            "name": "Kofi Boateng",
            "email": "kofi@example.com",
            "subject": "Programs",
            "message": "Which courses start next month?",
        }
    )
    print(f"Contact: success={contact.success}")
    return 0 if result.success else 1


if __name__ == "__main__":
    sys.exit(asyncio.run(main(sys.argv[1] if len(sys.argv) > 1 else BASE_URL)))
