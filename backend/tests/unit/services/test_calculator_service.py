"""Unit tests for building engine inputs from cost basis records."""

from unittest.mock import patch

import pytest

from backend.app.models.expenses import Consumable, ElectricityTariff, FixedExpense, ShippingOption
from backend.app.models.settings import LaborSettings, VatSettings
from backend.app.schemas.calculator import FilamentLine, PrintCalculationRequest
from backend.app.services.calculator import CostBasisNotFound, build_print_cost_input, calculate
from backend.app.utils.time_format import ParseError


async def _add(db, *records):
    db.add_all(records)
    await db.commit()
    for record in records:
        await db.refresh(record)
    return records


class TestBuildPrintCostInput:
    """Tests for build_print_cost_input."""

    @pytest.mark.asyncio
    async def test_resolves_printer_and_filament(self, db_session, printer_factory, filament_factory):
        printer = await printer_factory()
        filament = await filament_factory(spool_cost=20.0, spool_weight_grams=1000)
        (tariff,) = await _add(db_session, ElectricityTariff(name="Home", price_per_kwh=0.15))

        request = PrintCalculationRequest(
            print_time="2h",
            printer_id=printer.id,
            electricity_tariff_id=tariff.id,
            filaments=[FilamentLine(filament_id=filament.id, grams_used=50)],
            labor_time_minutes=15,
        )
        prepared = await build_print_cost_input(db_session, request)
        inputs = prepared.inputs

        assert prepared.print_time_minutes == 120
        assert inputs.print_time_minutes == 120
        assert inputs.printer_power_watts == 200
        assert inputs.printer_purchase_cost == 300
        assert inputs.printer_depreciation_hours == 5000
        assert inputs.maintenance_cost_per_year == 50
        assert inputs.electricity_price_per_kwh == 0.15
        assert inputs.filaments[0].grams_used == 50
        assert inputs.filaments[0].cost_per_gram == pytest.approx(0.02)
        assert prepared.filaments[0].filament_id == filament.id

    @pytest.mark.asyncio
    async def test_cost_per_gram_is_live(self, db_session, filament_factory):
        """A new spool price is picked up by the next calculation."""
        filament = await filament_factory(spool_cost=20.0, spool_weight_grams=1000)
        request = PrintCalculationRequest(
            print_time=60, filaments=[FilamentLine(filament_id=filament.id, grams_used=100)]
        )

        before = await build_print_cost_input(db_session, request)
        filament.spool_cost = 30.0
        await db_session.commit()
        after = await build_print_cost_input(db_session, request)

        assert before.inputs.filaments[0].cost_per_gram == pytest.approx(0.02)
        assert after.inputs.filaments[0].cost_per_gram == pytest.approx(0.03)

    @pytest.mark.asyncio
    async def test_defaults_when_nothing_selected(self, db_session):
        with patch("backend.app.services.calculator.settings") as mock_settings:
            mock_settings.default_printer_power_watts = 200.0
            mock_settings.default_electricity_price_per_kwh = 0.15
            mock_settings.default_hourly_rate = 10.0
            mock_settings.default_labor_minutes = 15
            mock_settings.default_wastage_percent = 5.0
            mock_settings.default_failure_rate_percent = 5.0
            mock_settings.default_markup_percent = 50.0
            mock_settings.default_printing_hours_per_year = 1000.0
            mock_settings.fixed_expense_prints_per_month = 100.0
            mock_settings.default_discount_tiers = [0, 5, 10, 20, 30, 50]

            prepared = await build_print_cost_input(db_session, PrintCalculationRequest(print_time="90"))

        inputs = prepared.inputs
        assert inputs.printer_power_watts == 200.0
        assert inputs.electricity_price_per_kwh == 0.15
        assert inputs.printer_depreciation_hours == 0
        assert inputs.hourly_rate == 10.0
        assert inputs.include_labor_in_cost is True
        assert inputs.labor_time_minutes == 15
        assert inputs.wastage_percent == 5.0
        assert inputs.failure_rate_percent == 5.0
        assert inputs.printing_hours_per_year == 1000.0
        assert prepared.markup_percent == 50.0
        assert inputs.filaments == ()
        assert prepared.prints_per_month == 100.0
        assert prepared.discount_tiers == (0, 5, 10, 20, 30, 50)

    @pytest.mark.asyncio
    async def test_labor_settings_row(self, db_session):
        await _add(db_session, LaborSettings(hourly_rate=18.0, include_in_cost=False, default_minutes_per_print=25))

        prepared = await build_print_cost_input(db_session, PrintCalculationRequest(print_time="1h"))

        assert prepared.inputs.hourly_rate == 18.0
        assert prepared.inputs.include_labor_in_cost is False
        assert prepared.labor_time_minutes == 25

    @pytest.mark.asyncio
    async def test_default_tariff_preferred(self, db_session):
        await _add(
            db_session,
            ElectricityTariff(name="Peak", price_per_kwh=0.30),
            ElectricityTariff(name="Contract", price_per_kwh=0.12, is_default=True),
        )

        prepared = await build_print_cost_input(db_session, PrintCalculationRequest(print_time="1h"))

        assert prepared.inputs.electricity_price_per_kwh == 0.12

    @pytest.mark.asyncio
    async def test_consumables_shipping_and_fixed_expenses(self, db_session):
        glue, box, rent, software, courier = await _add(
            db_session,
            Consumable(name="Glue", cost=0.10),
            Consumable(name="Box", cost=0.35),
            FixedExpense(name="Rent", monthly_amount=150.0),
            FixedExpense(name="Software", monthly_amount=50.0),
            ShippingOption(name="Courier", price=4.5),
        )
        request = PrintCalculationRequest(
            print_time="1h",
            consumable_ids=[glue.id, box.id],
            fixed_expense_ids=[rent.id, software.id],
            shipping_option_id=courier.id,
            prints_per_month=50,
        )

        prepared = await build_print_cost_input(db_session, request)

        assert prepared.inputs.consumables_cost == pytest.approx(0.45)
        assert prepared.inputs.fixed_expenses_cost == pytest.approx(4.0)
        assert prepared.inputs.shipping_cost == 4.5

    @pytest.mark.asyncio
    async def test_unknown_printer(self, db_session):
        with pytest.raises(CostBasisNotFound) as exc_info:
            await build_print_cost_input(db_session, PrintCalculationRequest(print_time="1h", printer_id=999))
        assert exc_info.value.kind == "Printer"
        assert exc_info.value.record_id == 999

    @pytest.mark.asyncio
    async def test_unknown_filament(self, db_session, filament_factory):
        filament = await filament_factory()
        request = PrintCalculationRequest(
            print_time="1h",
            filaments=[
                FilamentLine(filament_id=filament.id, grams_used=10),
                FilamentLine(filament_id=4242, grams_used=10),
            ],
        )
        with pytest.raises(CostBasisNotFound):
            await build_print_cost_input(db_session, request)

    @pytest.mark.asyncio
    async def test_inactive_filament(self, db_session, filament_factory):
        filament = await filament_factory(is_active=False)
        request = PrintCalculationRequest(
            print_time="1h", filaments=[FilamentLine(filament_id=filament.id, grams_used=10)]
        )

        with pytest.raises(CostBasisNotFound) as exc_info:
            await build_print_cost_input(db_session, request)
        assert exc_info.value.inactive is True
        assert "is inactive" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_resolved_divisor_and_tiers(self, db_session):
        request = PrintCalculationRequest(print_time="1h", prints_per_month=25, discount_tiers=[0, 40])

        prepared = await build_print_cost_input(db_session, request)

        assert prepared.prints_per_month == 25
        assert prepared.discount_tiers == (0, 40)

    @pytest.mark.asyncio
    async def test_negative_time_is_rejected(self, db_session):
        with pytest.raises(ParseError):
            await build_print_cost_input(db_session, PrintCalculationRequest(print_time=-30))

    @pytest.mark.asyncio
    async def test_unparsable_time_is_not_zero(self, db_session):
        with pytest.raises(ParseError):
            await build_print_cost_input(db_session, PrintCalculationRequest(print_time="two hours"))


class TestCalculate:
    """Tests for the full calculate() chain."""

    @pytest.mark.asyncio
    async def test_reference_scenario(self, db_session, printer_factory, filament_factory):
        printer = await printer_factory()
        filament = await filament_factory(spool_cost=20.0, spool_weight_grams=1000)
        (tariff,) = await _add(db_session, ElectricityTariff(name="Home", price_per_kwh=0.15))
        await _add(db_session, LaborSettings(hourly_rate=10.0, include_in_cost=True))

        request = PrintCalculationRequest(
            print_time="2h",
            printer_id=printer.id,
            electricity_tariff_id=tariff.id,
            filaments=[FilamentLine(filament_id=filament.id, grams_used=50)],
            labor_time_minutes=15,
            wastage_percent=5,
            failure_rate_percent=5,
            markup_percent=50,
            printing_hours_per_year=1000,
            discount_tiers=[0, 10],
        )
        result = await calculate(db_session, request)

        assert result.breakdown.cost_per_unit == pytest.approx(4.158)
        assert result.pricing.sell_price == pytest.approx(6.237)
        assert result.pricing.profit == pytest.approx(2.079)
        assert [row.discount for row in result.discount_table] == [0, 10]
        assert result.discount_table[0].price == result.pricing.sell_price
        assert result.vat is None

    @pytest.mark.asyncio
    async def test_vat_view_when_enabled(self, db_session):
        await _add(db_session, VatSettings(enabled=True, rate_percent=23.0))

        request = PrintCalculationRequest(
            print_time="1h",
            model_cost=10.0,
            markup_percent=0,
            wastage_percent=0,
            failure_rate_percent=0,
            labor_time_minutes=0,
        )
        result = await calculate(db_session, request)

        assert result.vat is not None
        assert result.vat.net == pytest.approx(result.pricing.sell_price)
        assert result.vat.gross == pytest.approx(result.pricing.sell_price * 1.23)
