# run_plan.py
import argparse
import os
import sys

# Add the project root to the Python path to ensure imports work correctly
project_root = os.path.dirname(os.path.abspath(__file__))
sys.path.insert(0, project_root)

from tbmplanner.airports.directory import AirportDirectory
from tbmplanner.planner import FlightPlanner, PlannerConfig

def main():
    """
    Plans a flight between two airports and prints the ranked cruise
    altitudes and, when needed, the fuel-stop options.
    """
    parser = argparse.ArgumentParser(description="TBM 850 flight planner")
    parser.add_argument("departure", help="Departure code (ICAO, IATA or FAA)")
    parser.add_argument("destination", help="Destination code (ICAO, IATA or FAA)")
    parser.add_argument("--airports", default=os.path.join(project_root, "data", "airports.csv"),
                        help="OurAirports-format airports CSV")
    parser.add_argument("--winds", choices=("gridded", "station", "none"), default="gridded")
    parser.add_argument("--forecast", choices=("06", "12", "24"), default="06",
                        help="Station bulletin forecast horizon")
    parser.add_argument("--weighted", action="store_true", help="Cross-track weight wind segments")
    args = parser.parse_args()

    directory = AirportDirectory.from_csv(args.airports)
    config = PlannerConfig(wind_source=args.winds, forecast_hour=args.forecast,
                           cross_track_weighting=args.weighted)
    result = FlightPlanner(directory, config).plan(args.departure, args.destination)

    if not result.success:
        print(f"ERROR: {result.error}")
        return 1

    print(f"--- {result.departure.display_name} -> {result.destination.display_name} ---")
    print(f"Distance {result.distance_nm:.0f} NM, course {result.true_course_deg:03.0f}T / "
          f"{result.magnetic_course_deg:03.0f}M, winds: {result.wind_source}")
    print("-" * 40)
    for option in result.altitude_options:
        leg = option.leg
        print(f"  #{option.rank} {option.flight_level}: {leg.formatted_time}  {leg.total_fuel_gal:.0f} gal  "
              f"GS {leg.ground_speed_kt:.0f} kt  ({option.wind_summary.description})")

    if result.fuel_plan is not None:
        plan = result.fuel_plan
        print("-" * 40)
        if not plan.success:
            print(f"FUEL STOP REQUIRED: {plan.error}")
            return 1
        if plan.two_stop_required:
            print("No single stop is within safe range; two stops required.")
        for label, option in (("1-stop cheapest", plan.cheapest_one_stop), ("1-stop fastest", plan.fastest_one_stop),
                              ("2-stop cheapest", plan.cheapest_two_stop), ("2-stop fastest", plan.fastest_two_stop)):
            if option is None:
                continue
            flag = " (est. price)" if option.price_estimated else ""
            print(f"  {label:<16} {option.route_label} FL{int(option.altitude_ft) // 100:03d}: "
                  f"{option.total_time_hr:.1f} h, {option.fuel_to_buy_gal:.0f} gal, ${option.total_cost:,.0f}{flag}")
    return 0

if __name__ == "__main__":
    sys.exit(main())
