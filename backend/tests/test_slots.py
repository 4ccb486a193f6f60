"""
Booking API - Slot Tests
=========================

What we test:
    ✅ Create, duplicate rejection, same slot with another mode
    ✅ Day listing uses the half-open window [00:00:00, 23:59:59)
    ✅ Paired booking (POST /api/slots/book) flips both flags
    ✅ Single booking (PUT /api/slots/book/{id}), double booking, unknown ids
    ✅ Concurrent bookings of one slot: exactly one winner
"""

import asyncio

import pytest
from sqlalchemy import select

from bookingapi.models.intake import IntakeSubmission
from bookingapi.models.slot import Slot


async def _create_slot(client, **overrides):
    payload = {"date": "2024-01-01", "starttime": "09:00", "endtime": "10:00", "mode": "online"}
    payload.update(overrides)
    response = await client.post("/api/slots", json=payload)
    assert response.status_code == 201, response.text
    return payload


async def _slot_id(client, day="2024-01-01", start="09:00"):
    slots = (await client.get("/api/slots", params={"date": day})).json()
    return next(s["id"] for s in slots if s["starttime"] == start)


class TestSlotCreation:

    @pytest.mark.asyncio
    async def test_create_slot(self, test_client, slot_payload):
        response = await test_client.post("/api/slots", json=slot_payload)

        assert response.status_code == 201
        assert response.json() == {"message": "Slot added successfully"}

    @pytest.mark.asyncio
    async def test_duplicate_slot_rejected(self, test_client, slot_payload):
        await test_client.post("/api/slots", json=slot_payload)

        response = await test_client.post("/api/slots", json=slot_payload)

        assert response.status_code == 400
        assert response.json()["message"] == "Slot already exists for the given date and time"

    @pytest.mark.asyncio
    async def test_same_time_other_mode_allowed(self, test_client, slot_payload):
        await test_client.post("/api/slots", json=slot_payload)

        response = await test_client.post(
            "/api/slots", json={**slot_payload, "mode": "in-person"}
        )

        assert response.status_code == 201

    @pytest.mark.asyncio
    async def test_camel_case_times_accepted(self, test_client):
        response = await test_client.post(
            "/api/slots",
            json={"date": "2024-01-01", "startTime": "11:00", "endTime": "12:00", "mode": "online"},
        )

        assert response.status_code == 201

    @pytest.mark.asyncio
    async def test_missing_mode_is_bad_request(self, test_client, slot_payload):
        del slot_payload["mode"]

        response = await test_client.post("/api/slots", json=slot_payload)

        assert response.status_code == 400
        assert "mode" in response.json()["message"]


class TestSlotListing:

    @pytest.mark.asyncio
    async def test_lists_only_requested_day(self, test_client):
        await _create_slot(test_client, date="2024-01-01T00:00:00")
        await _create_slot(test_client, date="2024-01-01T14:30:00", starttime="14:30")
        await _create_slot(test_client, date="2024-01-02", starttime="09:00")
        await _create_slot(test_client, date="2023-12-31T23:00:00", starttime="23:00")

        response = await test_client.get("/api/slots", params={"date": "2024-01-01"})

        assert response.status_code == 200
        slots = response.json()
        assert [s["starttime"] for s in slots] == ["09:00", "14:30"]
        assert all(s["date"].startswith("2024-01-01") for s in slots)
        assert all(s["isBooked"] is False for s in slots)
        assert {"id", "date", "starttime", "endtime", "mode", "isBooked"} <= set(slots[0])

    @pytest.mark.asyncio
    async def test_window_end_is_exclusive(self, test_client):
        await _create_slot(test_client, date="2024-01-01T23:59:59", starttime="23:59")

        response = await test_client.get("/api/slots", params={"date": "2024-01-01"})

        assert response.json() == []

    @pytest.mark.asyncio
    async def test_empty_day(self, test_client):
        response = await test_client.get("/api/slots", params={"date": "2030-06-01"})

        assert response.status_code == 200
        assert response.json() == []

    @pytest.mark.asyncio
    async def test_missing_date_is_bad_request(self, test_client):
        response = await test_client.get("/api/slots")

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_invalid_date_is_bad_request(self, test_client):
        response = await test_client.get("/api/slots", params={"date": "not-a-date"})

        assert response.status_code == 400
        assert "YYYY-MM-DD" in response.json()["message"]


class TestPairedBooking:

    async def _submission_id(self, client, payload):
        await client.post("/data", json=payload)
        return (await client.get("/api/latestdata")).json()["id"]

    @pytest.mark.asyncio
    async def test_book_marks_slot_and_submission(
        self, test_client, db_session, intake_payload
    ):
        await _create_slot(test_client)
        slot_id = await _slot_id(test_client)
        data_id = await self._submission_id(test_client, intake_payload)

        response = await test_client.post(
            "/api/slots/book", json={"slotId": slot_id, "dataId": data_id}
        )

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Slot booked successfully"
        assert body["slot"]["id"] == slot_id
        assert body["slot"]["isBooked"] is True

        slot = (await db_session.execute(select(Slot))).scalar_one()
        submission = (await db_session.execute(select(IntakeSubmission))).scalar_one()
        assert slot.is_booked is True
        assert submission.is_submitted is True

    @pytest.mark.asyncio
    async def test_second_booking_rejected(self, test_client, intake_payload):
        await _create_slot(test_client)
        slot_id = await _slot_id(test_client)
        data_id = await self._submission_id(test_client, intake_payload)
        await test_client.post("/api/slots/book", json={"slotId": slot_id, "dataId": data_id})

        response = await test_client.post(
            "/api/slots/book", json={"slotId": slot_id, "dataId": data_id}
        )

        assert response.status_code == 400
        assert response.json() == {"message": "Slot is already booked"}

    @pytest.mark.asyncio
    async def test_unknown_slot(self, test_client, intake_payload):
        data_id = await self._submission_id(test_client, intake_payload)

        response = await test_client.post(
            "/api/slots/book",
            json={"slotId": "00000000-0000-0000-0000-000000000000", "dataId": data_id},
        )

        assert response.status_code == 404
        assert response.json() == {"message": "Slot not found"}

    @pytest.mark.asyncio
    async def test_unknown_submission_leaves_slot_free(self, test_client):
        await _create_slot(test_client)
        slot_id = await _slot_id(test_client)

        response = await test_client.post(
            "/api/slots/book", json={"slotId": slot_id, "dataId": "not-an-id"}
        )

        assert response.status_code == 404
        assert response.json() == {"message": "Data not found"}
        slots = (await test_client.get("/api/slots", params={"date": "2024-01-01"})).json()
        assert slots[0]["isBooked"] is False


class TestSingleBooking:

    @pytest.mark.asyncio
    async def test_put_books_slot(self, test_client):
        await _create_slot(test_client)
        slot_id = await _slot_id(test_client)

        response = await test_client.put(f"/api/slots/book/{slot_id}")

        assert response.status_code == 200
        assert response.json()["slot"]["isBooked"] is True

    @pytest.mark.asyncio
    async def test_put_twice_rejected(self, test_client):
        await _create_slot(test_client)
        slot_id = await _slot_id(test_client)
        await test_client.put(f"/api/slots/book/{slot_id}")

        response = await test_client.put(f"/api/slots/book/{slot_id}")

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_put_malformed_id(self, test_client):
        response = await test_client.put("/api/slots/book/12345")

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_concurrent_bookings_single_winner(self, test_client):
        await _create_slot(test_client)
        slot_id = await _slot_id(test_client)
        attempts = 5

        responses = await asyncio.gather(
            *(test_client.put(f"/api/slots/book/{slot_id}") for _ in range(attempts))
        )

        statuses = sorted(r.status_code for r in responses)
        assert statuses == [200] + [400] * (attempts - 1)
