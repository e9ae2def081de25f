import argparse
import logging

import uvicorn

SURFACES = {
    "aggregator": "aggregator.main:app",
    "bmi": "bmi_calculator.main:app",
}


def main():
    parser = argparse.ArgumentParser(description="Run one of the web surfaces")
    parser.add_argument("surface", nargs="?", default="aggregator", choices=sorted(SURFACES))
    args = parser.parse_args()

    if args.surface == "bmi":
        from bmi_calculator.config import HOST, PORT
    else:
        from aggregator.config import HOST, PORT

    logging.getLogger(__name__).info("Server is running on http://%s:%s", HOST, PORT)
    uvicorn.run(SURFACES[args.surface], host=HOST, port=PORT)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    main()
