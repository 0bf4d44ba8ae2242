from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from ecomove.domain.errors import ValidationError
from ecomove.domain.value_objects.battery_level import BatteryLevel, BatteryStatus
from ecomove.domain.value_objects.coordinate import Coordinate
from ecomove.domain.value_objects.document_number import DocumentNumber
from ecomove.domain.value_objects.duration import Duration
from ecomove.domain.value_objects.email import Email
from ecomove.domain.value_objects.money import Money
from ecomove.domain.value_objects.phone import Phone


class TestMoney:
    def test_amount_is_stored_as_decimal(self):
        money = Money.create(2000.5)

        assert money.amount == Decimal("2000.5")
        assert money.currency == "COP"

    @pytest.mark.parametrize("amount", [-1, "-0.01", Decimal("-5")])
    def test_negative_amount_is_rejected(self, amount):
        with pytest.raises(ValidationError):
            Money.create(amount)

    @pytest.mark.parametrize("amount", ["NaN", "Infinity", "abc"])
    def test_non_finite_amount_is_rejected(self, amount):
        with pytest.raises(ValidationError):
            Money.create(amount)

    def test_currency_must_have_three_letters(self):
        with pytest.raises(ValidationError):
            Money.create(10, "CO")

    def test_add_and_subtract_same_currency(self):
        a = Money.create(3000)
        b = Money.create(1000)

        assert a.add(b) == Money.create(4000)
        assert a.subtract(b) == Money.create(2000)

    @pytest.mark.parametrize(
        "a, b", [("0.1", "0.2"), (2000, 500), (0, 0), ("12345.67", "0.33"), (1, "999999.99")]
    )
    def test_add_then_subtract_is_identity(self, a, b):
        a, b = Money.create(a), Money.create(b)

        assert a.add(b).subtract(b) == a
        assert a.add(b).subtract(a) == b

    def test_subtract_below_zero_fails(self):
        with pytest.raises(ValidationError):
            Money.create(1000).subtract(Money.create(1500))

    def test_mixed_currencies_fail(self):
        with pytest.raises(ValidationError):
            Money.create(10, "COP").add(Money.create(10, "USD"))

    def test_multiply_and_divide(self):
        rate = Money.create(2000)

        assert rate.multiply(3) == Money.create(6000)
        assert rate.divide(4) == Money.create(500)
        with pytest.raises(ValidationError):
            rate.multiply(-1)
        with pytest.raises(ValidationError):
            rate.divide(0)

    def test_comparisons_and_zero(self):
        assert Money.create(10).is_greater_than(Money.create(5))
        assert Money.create(5).is_less_than(Money.create(10))
        assert Money.zero().is_zero()
        assert Money.zero("USD").currency == "USD"

    def test_format_uses_colombian_separators(self):
        assert Money.create(4000).format() == "$4.000 COP"
        assert Money.create("1234567.5").format() == "$1.234.567,50 COP"


class TestDuration:
    def test_negative_duration_is_rejected(self):
        with pytest.raises(ValidationError):
            Duration.create(-1)

    def test_conversions(self):
        assert Duration.from_hours(2).minutes == 120
        assert Duration.from_days(1).hours == 24
        assert Duration.create(90).hours == 1.5
        assert Duration.from_hours(0.1) == Duration(6)
        assert Duration.from_days("0.5").minutes == 720

    def test_arithmetic(self):
        assert Duration(30).add(Duration(15)) == Duration(45)
        assert Duration(30).subtract(Duration(10)) == Duration(20)
        with pytest.raises(ValidationError):
            Duration(10).subtract(Duration(30))

    @pytest.mark.parametrize("a, b", [(0.1, 0.2), (30, 45), (0, 0), (1440, 1.5), ("0.3", 0.7)])
    def test_add_then_subtract_is_identity(self, a, b):
        a, b = Duration(a), Duration(b)

        assert a.add(b).subtract(b) == a
        assert a.add(b).subtract(a) == b

    @pytest.mark.parametrize("minutes", [float("nan"), float("inf"), "NaN", "Infinity", "abc"])
    def test_non_finite_or_non_numeric_minutes_are_rejected(self, minutes):
        with pytest.raises(ValidationError):
            Duration(minutes)

    def test_multiply(self):
        assert Duration(30).multiply(1.5) == Duration(45)
        with pytest.raises(ValidationError):
            Duration(30).multiply(-1)
        with pytest.raises(ValidationError):
            Duration(30).multiply(float("nan"))

    @pytest.mark.parametrize(
        "minutes, expected",
        [(45, "45 min"), (60, "1 h"), (65, "1 h 5 min"), (1440, "1 d"), (3060, "2 d 3 h")],
    )
    def test_format(self, minutes, expected):
        assert Duration(minutes).format() == expected

    def test_between_counts_whole_minutes_and_clamps_to_zero(self):
        start = datetime(2025, 1, 1, 8, 0, tzinfo=timezone.utc)

        assert Duration.between(start, start + timedelta(minutes=65, seconds=59)).minutes == 65
        assert Duration.between(start, start - timedelta(minutes=5)).minutes == 0


class TestCoordinate:
    @pytest.mark.parametrize("lat, lng", [(91, 0), (-90.5, 0), (0, 180.1), (0, -181)])
    def test_out_of_range_is_rejected(self, lat, lng):
        with pytest.raises(ValidationError):
            Coordinate.create(lat, lng)

    def test_distance_is_zero_to_itself(self):
        point = Coordinate(4.6766, -74.0483)

        assert point.distance_to(point) == pytest.approx(0.0)

    def test_haversine_distance_between_bogota_points(self):
        parque_93 = Coordinate(4.6766, -74.0483)
        usaquen = Coordinate(4.6952, -74.0307)

        assert parque_93.distance_to(usaquen) == pytest.approx(2.83, abs=0.05)
        assert usaquen.is_within_radius(parque_93, 3)
        assert not usaquen.is_within_radius(parque_93, 2)

    def test_approx_equals_and_tuple_helpers(self):
        point = Coordinate.from_lat_lng((4.6766, -74.0483))

        assert point.lat_lng == (4.6766, -74.0483)
        assert point.approx_equals(Coordinate(4.67665, -74.04825))
        assert not point.approx_equals(Coordinate(4.6770, -74.0483))


class TestBatteryLevel:
    @pytest.mark.parametrize("value", [-1, 100.5, 150])
    def test_out_of_range_is_rejected(self, value):
        with pytest.raises(ValidationError):
            BatteryLevel.create(value)

    @pytest.mark.parametrize(
        "value, status",
        [
            (0, BatteryStatus.CRITICAL),
            (10, BatteryStatus.CRITICAL),
            (11, BatteryStatus.LOW),
            (25, BatteryStatus.LOW),
            (26, BatteryStatus.GOOD),
            (75, BatteryStatus.GOOD),
            (76, BatteryStatus.EXCELLENT),
            (100, BatteryStatus.EXCELLENT),
        ],
    )
    def test_status_bands(self, value, status):
        assert BatteryLevel(value).status == status

    def test_rentable_only_above_ten_percent(self):
        assert not BatteryLevel(10).can_be_rented()
        assert BatteryLevel(11).can_be_rented()
        assert BatteryLevel.full().is_excellent()
        assert BatteryLevel.empty().is_critical()


class TestEmail:
    def test_normalizes_case_and_whitespace(self):
        assert Email.create("  Ana.Gomez@EcoMove.CO ").value == "ana.gomez@ecomove.co"
        assert Email("A@B.co") == Email("a@b.co")

    @pytest.mark.parametrize("value", ["", "sin-arroba.com", "a@b", "a b@c.co", "a@b.co" + "m" * 260])
    def test_invalid_addresses(self, value):
        with pytest.raises(ValidationError) as exc_info:
            Email.create(value)

        assert exc_info.value.field == "email"

    def test_domain(self):
        assert Email("ana@ecomove.co").domain == "ecomove.co"


class TestPhone:
    @pytest.mark.parametrize(
        "value", ["3001234567", "300 123 4567", "+57 300 123 4567", "57-300-123-4567"]
    )
    def test_accepts_colombian_mobile_formats(self, value):
        assert Phone.create(value).value == "3001234567"

    @pytest.mark.parametrize("value", ["2001234567", "300123456", "30012345678", "abc"])
    def test_rejects_invalid_numbers(self, value):
        with pytest.raises(ValidationError) as exc_info:
            Phone.create(value)

        assert exc_info.value.code == "INVALID_PHONE"

    def test_display_formats(self):
        phone = Phone("3001234567")

        assert phone.international() == "+57 3001234567"
        assert phone.formatted() == "300 123 4567"


class TestDocumentNumber:
    @pytest.mark.parametrize("value, expected", [("1.020.304.050", "1020304050"), ("79555111", "79555111")])
    def test_strips_separators(self, value, expected):
        assert DocumentNumber.create(value).value == expected

    @pytest.mark.parametrize("value", ["1234567", "123456789012", "0123456789", ""])
    def test_rejects_invalid_documents(self, value):
        with pytest.raises(ValidationError):
            DocumentNumber.create(value)

    def test_formatted_groups_thousands(self):
        assert DocumentNumber("1020304050").formatted() == "1.020.304.050"
