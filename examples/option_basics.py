"""
Option basics: construction, exception-tolerant chains, and extraction.

Run: python examples/option_basics.py
"""
import logging

from optionpy import some, none, from_nullable, from_throwing, UnwrapError


USERS = {"ada": {"email": "ada@example.com"}, "bob": {}}


def find_email(name):
    # Missing users and missing emails both end up as NONE
    return from_nullable(USERS.get(name)).map(lambda u: u.get("email"))


def main():
    logging.basicConfig(level=logging.DEBUG, format="%(name)s %(levelname)s: %(message)s")

    print("ada =>", find_email("ada"))                      # Some(value='ada@example.com')
    print("bob =>", find_email("bob"))                      # NONE
    print("eve =>", find_email("eve").get_or_else(lambda: "<none>"))

    # A raising mapper collapses the chain instead of escaping (logged at DEBUG)
    port = from_nullable("80a").map(int).filter(lambda p: p < 65536)
    print("port =>", port)                                  # NONE

    parsed = from_throwing(lambda: int("8080"))
    print("parsed =>", parsed.fold(lambda p: f"port {p}", lambda: "no port"))

    print("equal =>", some("foo").equals(from_nullable("foo")))

    try:
        none().unwrap("no value configured")
    except UnwrapError as e:
        print("unwrap =>", e)


if __name__ == "__main__":
    main()
