"""
Option call sites: default text, sum of squares, nested optional fields.

Run: python examples/option_examples.py
"""
from optionpy import ConsoleLogger, from_nullable, pipe, chain_nullable, get_or_else
from optionpy.examples import Horse, describe_horse, calculate_sum_of_squares, get_house_number


def main():
    log = ConsoleLogger(name="option-examples", level="DEBUG")

    # Example one: default text
    for maybe_horse in (None, Horse(name="Hoof Hearted", color="white", legs=4)):
        log.info(describe_horse(maybe_horse), example="horse")

    # Example two: two maps in a row
    for maybe_list in (None, [1, 2, 3, 4, 5]):
        log.info(f"sum of squares => {calculate_sum_of_squares(maybe_list)}", example="squares", input=maybe_list)

    # Example three: nested objects that could be missing
    people = [
        {"company": {"address": {"street": {"number": 91210}}}},
        {"company": {}},
        {"company": {"address": {}}},
        {"company": {"address": {"street": {}}}},
    ]
    for person in people:
        log.info(f"house number => {get_house_number(person)}", example="nested")

    # Fallbacks are only computed when needed
    def fallback():
        log.debug("computing fallback")
        return "unknown"

    city = pipe(
        {"city": "Leeds"},
        from_nullable,
        chain_nullable(lambda d: d.get("city")),
        get_or_else(fallback),
    )
    log.info(f"city => {city}", example="lazy")  # no debug line above


if __name__ == "__main__":
    main()
