import argparse
import json
import logging
import os
import sys
from datetime import datetime

from dotenv import load_dotenv

from api.schemas import BirthDateTime, CoordinatesIn, NatalChartRequest
from api.routers.charts import build_response
from api.services.errors import ChartInputError, CollaboratorError
from api.services.geocoding import resolve_location
from api.services.models import Coordinates
from api.services.natal import compute_natal_chart


def _natal(args) -> dict:
    when = datetime.strptime(f"{args.date} {args.time}", "%Y-%m-%d %H:%M")
    birth = BirthDateTime(
        year=when.year, month=when.month, day=when.day, hour=when.hour, minute=when.minute
    )
    if args.lat is not None and args.lon is not None:
        req_location = CoordinatesIn(latitude=args.lat, longitude=args.lon)
        location = Coordinates(args.lat, args.lon)
    elif args.location:
        req_location = location = args.location
    else:
        raise SystemExit("natal: give --location or both --lat and --lon")

    req = NatalChartRequest(datetime=birth, location=req_location, house_system=args.house_system)
    result = compute_natal_chart(
        birth.year, birth.month, birth.day, birth.hour, birth.minute, location, req.house_system
    )
    return build_response(req, result).model_dump()


def _coordinates(args) -> dict:
    coords = resolve_location(args.location)
    return {
        "latitude": coords.latitude,
        "longitude": coords.longitude,
        "formatted_address": coords.formatted_address,
    }


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Natal chart calculator")
    sub = parser.add_subparsers(dest="command", required=True)

    natal = sub.add_parser("natal", help="Compute a natal chart and print it as JSON")
    natal.add_argument("--date", required=True, help="Local birth date, YYYY-MM-DD")
    natal.add_argument("--time", required=True, help="Local birth time, HH:MM")
    natal.add_argument("--location", help="Birth place, e.g. 'London, UK'")
    natal.add_argument("--lat", type=float, help="Latitude in decimal degrees")
    natal.add_argument("--lon", type=float, help="Longitude in decimal degrees")
    natal.add_argument("--house-system", default="Placidus")
    natal.set_defaults(func=_natal)

    coords = sub.add_parser("coordinates", help="Geocode a place name")
    coords.add_argument("location")
    coords.set_defaults(func=_coordinates)
    return parser


def main(argv=None) -> int:
    load_dotenv()
    logging.basicConfig(level=os.getenv("LOG_LEVEL", "WARNING").upper())
    args = build_parser().parse_args(argv)
    try:
        output = args.func(args)
    except ChartInputError as exc:
        print(f"{exc.field}: {exc.message}", file=sys.stderr)
        return 2
    except ValueError as exc:  # bad --date/--time or a schema ValidationError
        print(str(exc), file=sys.stderr)
        return 2
    except CollaboratorError as exc:
        print(str(exc), file=sys.stderr)
        return 1
    print(json.dumps(output, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
