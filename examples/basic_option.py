"""
Basic options: construction, chaining, fallbacks, and the debug log on unwrap.

Run: python examples/basic_option.py
"""
from optionpy import InvalidState, some, none, from_nullable, configure_logging, ops


def parse_port(raw: str):
    return some(int(raw)) if raw.isdigit() else none()


def main():
    greeting = some("Hello").map(lambda x: x + " World!")
    print("greeting =>", greeting.unwrap())                        # Hello World!
    print("farewell =>", none().map(str.upper).unwrap_or("Good Bye!"))  # Good Bye!

    # chain lookups that may each come up empty
    env = {"PORT": "8080", "HOST": None}
    port = from_nullable(env.get("PORT")).and_then(parse_port).filter(lambda p: p < 65536)
    host = from_nullable(env.get("HOST")).or_else(lambda: some("localhost"))
    print("address =>", host.zip(port).map_or("unset", lambda hp: f"{hp[0]}:{hp[1]}"))

    # free-function form
    print("flatten =>", ops.flatten(some(some(some(3)))))          # Some(value=3)
    print("xor =>", ops.xor(some(1), some(2)))                      # None

    configure_logging(level="DEBUG")
    try:
        none().expect("no user configured")
    except InvalidState as e:
        print("expect failed =>", e)


if __name__ == "__main__":
    main()
