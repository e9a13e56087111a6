"""Gradio UI for the Taxi Fare Estimator."""

from typing import Any, Dict

import gradio as gr
from pydantic import ValidationError

from cabfare.config.env_loader import load_environment_variables

load_environment_variables()

from cabfare.config.settings import get_settings
from cabfare.config.messages import (
    ERROR_INVALID_TRIP,
    ERROR_UNKNOWN_VEHICLE,
    FORMAT_BREAKDOWN_LABEL,
    FORMAT_CURRENCY_SYMBOL,
    FORMAT_TOTAL_LABEL,
    advisory_text,
)
from cabfare.core.calculator import FareCalculator
from cabfare.models.schema import FareMode
from cabfare.models.trip_models import FareBreakdown

TRIP_MODES = [FareMode.DROP.value, FareMode.OUTSTATION.value, FareMode.HOURLY.value,
              FareMode.DISTANCE.value, FareMode.FIXED.value]


class FareEstimatorInterface:
    """Form wrapper around FareCalculator.

    Builds trip parameters from the form fields, keeping only the fields
    that belong to the selected mode, and renders the breakdown.
    """

    def __init__(self):
        self.calculator = FareCalculator()

    def vehicle_choices(self):
        return [(vehicle.name, vehicle.id) for vehicle in self.calculator.catalog.vehicles]

    def state_choices(self):
        return [""] + sorted(self.calculator.catalog.permits)

    def build_params(self, mode: str, vehicle_id: str, start_km: float, end_km: float,
                     days: int, rate_per_km: float, toll: float, parking: float,
                     gst_enabled: bool, waiting_hours: float, is_hill_station: bool,
                     pet_charge: bool, is_night_drive: bool, interstate_state: str,
                     include_garage_buffer: bool, duration_hours: float,
                     package_price: float) -> Dict[str, Any]:
        params = {
            "mode": mode,
            "vehicle_id": vehicle_id,
            "start_km": start_km or 0,
            "end_km": end_km or 0,
            "days": int(days or 1),
            "rate_per_km": rate_per_km or 0,
            "toll": toll or 0,
            "parking": parking or 0,
            "gst_enabled": gst_enabled,
            "waiting_hours": waiting_hours or 0,
            "is_hill_station": is_hill_station,
            "pet_charge": pet_charge,
            "is_night_drive": is_night_drive,
            "interstate_state": interstate_state or None,
            "include_garage_buffer": include_garage_buffer,
        }
        if mode == FareMode.HOURLY.value:
            params["duration_hours"] = duration_hours or 0
            params["package_price"] = package_price or 0
        elif mode == FareMode.FIXED.value:
            params["package_price"] = package_price or 0
        return params

    def estimate(self, *fields) -> str:
        """Calculate and render the fare for the form fields."""
        try:
            breakdown = self.calculator.calculate(self.build_params(*fields))
        except ValidationError as e:
            return ERROR_INVALID_TRIP.format(details=e.error_count())
        if breakdown.is_empty:
            return ERROR_UNKNOWN_VEHICLE
        return self.render(breakdown)

    @staticmethod
    def render(breakdown: FareBreakdown) -> str:
        rs = FORMAT_CURRENCY_SYMBOL
        lines = [
            f"## {FORMAT_TOTAL_LABEL} {rs}{breakdown.total:,.0f}",
            f"**{FORMAT_BREAKDOWN_LABEL}**",
            f"- Distance: {breakdown.effective_distance:g} km @ {rs}{breakdown.rate_used:g}/km"
            f" = {rs}{breakdown.distance_charge:,.0f}",
        ]
        optional_rows = [
            ("Driver Batta", breakdown.driver_batta),
            ("Night Charge", breakdown.night_bata),
            ("Night Stay", breakdown.night_stay),
            ("Waiting Charges", breakdown.waiting_charges),
            ("Hill Station Charges", breakdown.hill_station_charges),
            ("Pet Charges", breakdown.pet_charges),
            ("GST", breakdown.gst),
            ("Toll / Parking / Permit", breakdown.exempt_total),
        ]
        lines += [f"- {label}: {rs}{amount:,.0f}" for label, amount in optional_rows if amount]
        message = advisory_text(breakdown.advisory)
        if message:
            lines.append(f"\n> {message}")
        return "\n".join(lines)


def create_demo():
    """Create and return the Gradio fare estimator.

    Returns:
        gr.Blocks: Configured Gradio interface
    """
    estimator = FareEstimatorInterface()

    with gr.Blocks(theme=gr.themes.Soft()) as demo:
        gr.Markdown("<h1 style='text-align: center; margin: 20px 0;'>Taxi Fare Estimator</h1>")
        with gr.Row():
            with gr.Column():
                mode = gr.Radio(TRIP_MODES, value=FareMode.DROP.value, label="Trip Type")
                vehicle_id = gr.Dropdown(estimator.vehicle_choices(), value="sedan", label="Vehicle")
                start_km = gr.Number(value=0, label="Start KM")
                end_km = gr.Number(value=0, label="End KM")
                days = gr.Number(value=1, precision=0, label="Days")
                rate_per_km = gr.Number(value=0, label="Rate per KM (0 = tariff)")
                duration_hours = gr.Number(value=0, label="Hours (hourly)")
                package_price = gr.Number(value=0, label="Package Price")
            with gr.Column():
                toll = gr.Number(value=0, label="Toll")
                parking = gr.Number(value=0, label="Parking")
                waiting_hours = gr.Number(value=0, label="Waiting Hours")
                interstate_state = gr.Dropdown(estimator.state_choices(), value="", label="Interstate Permit")
                gst_enabled = gr.Checkbox(label="Add GST (5%)")
                is_hill_station = gr.Checkbox(label="Hill Station")
                pet_charge = gr.Checkbox(label="Pet")
                is_night_drive = gr.Checkbox(label="Night Drive")
                include_garage_buffer = gr.Checkbox(label="Garage Buffer (+20 KM)")
        output = gr.Markdown()
        inputs = [mode, vehicle_id, start_km, end_km, days, rate_per_km, toll, parking,
                  gst_enabled, waiting_hours, is_hill_station, pet_charge, is_night_drive,
                  interstate_state, include_garage_buffer, duration_hours, package_price]
        gr.Button("Calculate Fare", variant="primary").click(estimator.estimate, inputs, output)

    return demo


def main():
    """Main entry point for the Taxi Fare Estimator."""
    settings = get_settings()
    print("=" * 60)
    print("Taxi Fare Estimator")
    print("=" * 60)
    print(f"Navigate to: http://localhost:{settings.server_port}")
    print("Press Ctrl+C to stop the server.")
    print("=" * 60)

    demo = create_demo()
    demo.launch(
        server_name=settings.server_host,
        server_port=settings.server_port,
        share=False
    )


if __name__ == "__main__":
    main()
