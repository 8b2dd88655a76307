#!/usr/bin/env python3
"""
Interactive local booking harness (no HTTP).

Usage:
  python3 scripts/book_local.py

What it does:
- Mounts a booking wizard for the demo patient
- Lets you pick specialization, doctor, date and time by typing
- Prints the selection, shortlist, notifications and navigation after every step
"""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from app.application.utils.time_slots import TIME_SLOTS, format_slot_label
from app.domain.entities.booking_selection import BookingStep
from app.infrastructure.auth.static_auth import MOCK_USERS
from app.wiring.dependencies import build_booking_session, get_doctor_directory


def _print_header() -> None:
    print("\nLocal Booking Harness")
    print("-" * 60)
    print("Type a choice for the current step and press Enter.")
    print("Commands: /back, /quit, /help")
    print("-" * 60)


def _print_prompt(session) -> None:
    wizard = session.wizard
    selection = wizard.selection
    if selection is None:
        return
    print(f"\n[step {int(selection.step)}] {selection.step.name.replace('_', ' ').title()}")
    if selection.step == BookingStep.SELECT_SPECIALIZATION:
        for spec in get_doctor_directory().list_specializations():
            print(f"  - {spec.name}: {spec.description}")
    elif selection.step == BookingStep.SELECT_DOCTOR:
        for doctor in wizard.shortlist:
            print(f"  {doctor.id}) {doctor.name}  ${doctor.fee:g}  {doctor.rating}*  {doctor.location}")
    elif selection.step == BookingStep.SELECT_DATE:
        print(f"  Available days: {', '.join(selection.doctor.availability)}  (YYYY-MM-DD)")
    elif selection.step == BookingStep.SELECT_TIME:
        print("  " + "  ".join(f"{slot} ({format_slot_label(slot)})" for slot in TIME_SLOTS))
    elif selection.step == BookingStep.CONFIRM_AND_PAY:
        doctor = selection.doctor
        print(f"  {doctor.name} / {doctor.specialization} / {selection.date} {selection.time}")
        print(f"  {doctor.location}  Total: ${doctor.fee:g}")
        print("  Type 'pay' to confirm.")


def _flush(session) -> None:
    for item in session.notifications.drain():
        print(f"  [{item['level']}] {item['message']}")
    route = session.navigator.drain()
    if route:
        print(f"  -> navigate to {route}")


def _dispatch(session, text: str):
    wizard = session.wizard
    step = wizard.selection.step
    if step == BookingStep.SELECT_SPECIALIZATION:
        return wizard.select_specialization(text)
    if step == BookingStep.SELECT_DOCTOR:
        return wizard.select_doctor(text)
    if step == BookingStep.SELECT_DATE:
        return wizard.select_date(text)
    if step == BookingStep.SELECT_TIME:
        return wizard.select_time(text)
    if text.lower() == "pay":
        print("  Processing payment...")
        return asyncio.run(wizard.confirm_and_pay())
    return None


def main() -> int:
    user = next(iter(MOCK_USERS.values()))
    session = build_booking_session(user)
    session.wizard.mount()
    _print_header()
    _print_prompt(session)

    while session.wizard.is_mounted:
        try:
            text = input("> ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break
        if not text:
            continue
        if text == "/quit":
            break
        if text == "/help":
            _print_header()
            _print_prompt(session)
            continue
        if text == "/back":
            session.wizard.go_back()
        else:
            result = _dispatch(session, text)
            if result is not None and result.action.startswith("payment"):
                for event in session.wizard.payment_events:
                    if event.message:
                        print(f"  [payment {event.kind}] {event.message}")
        _flush(session)
        _print_prompt(session)

    session.wizard.unmount()
    return 0


if __name__ == "__main__":
    sys.exit(main())
