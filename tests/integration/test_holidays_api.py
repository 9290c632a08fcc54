# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Integration tests for calendar endpoints."""

import holidays


class TestHolidayEndpoints:
    """Tests for /api/v1/holidays."""

    def test_holidays_for_year(self, client):
        response = client.get("/api/v1/holidays/2024")
        assert response.status_code == 200
        data = response.json()
        assert len(data) == 11
        assert "2024-03-31" in [h["date"] for h in data]
        assert "2024-04-26" not in [h["date"] for h in data]

    def test_holidays_for_2023_include_store_bededag(self, client):
        data = client.get("/api/v1/holidays/2023").json()
        name = holidays.DK(years=2023)["2023-05-05"]
        assert {"date": "2023-05-05", "name": name} in data

    def test_working_days(self, client):
        response = client.get(
            "/api/v1/holidays/working-days",
            params={"start_date": "2024-12-23", "end_date": "2024-12-27"},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["working_days"] == 2
        assert [h["date"] for h in data["holidays"]] == [
            "2024-12-24",
            "2024-12-25",
            "2024-12-26",
        ]

    def test_working_days_rejects_inverted_range(self, client):
        response = client.get(
            "/api/v1/holidays/working-days",
            params={"start_date": "2024-12-27", "end_date": "2024-12-23"},
        )
        assert response.status_code == 422

    def test_holidays_between(self, client):
        response = client.get(
            "/api/v1/holidays/between",
            params={"start_date": "2024-12-31", "end_date": "2025-01-01"},
        )
        name = holidays.DK(years=2025)["2025-01-01"]
        assert response.json() == [{"date": "2025-01-01", "name": name}]


class TestHolidayYearEndpoints:
    """Tests for /api/v1/holiday-years."""

    def test_holiday_year_for_date(self, client):
        response = client.get("/api/v1/holiday-years/2025-03-15")
        assert response.status_code == 200
        assert response.json() == {
            "holiday_year": "2024-2025",
            "start_date": "2024-09-01",
            "end_date": "2025-08-31",
            "taking_period_end": "2025-12-31",
            "transfer_deadline": "2025-12-31",
            "previous_holiday_year": "2023-2024",
            "next_holiday_year": "2025-2026",
        }

    def test_current_holiday_year(self, client):
        response = client.get("/api/v1/holiday-years/current")
        assert response.status_code == 200
        assert "-" in response.json()["holiday_year"]

    def test_invalid_date(self, client):
        assert client.get("/api/v1/holiday-years/not-a-date").status_code == 422


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}
