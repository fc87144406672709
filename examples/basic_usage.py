"""Basic Iridescent usage examples.

Run directly with:
    python examples/basic_usage.py
"""
from iridescent import Color, UnresolvableColorName


def demonstrate_parsing() -> None:
    # The same color written six different ways.
    for value in ("#ff0080", "#F08", "rgb(255, 0, 128)", "rgba(255, 0, 128, 0.5)",
                  '{"r": 255, "g": 0, "b": 128}', "deeppink"):
        print(f"{value!r:>32} -> {Color(value).to_rgb()}")

    print("Three bands:", Color(255, 0, 128).hex)
    print("Hex bands:", Color("ff", "00", "80").hex)

    try:
        Color("not-a-color")
    except UnresolvableColorName as exc:
        print("Unknown name:", exc)


def demonstrate_derivations() -> None:
    red = Color("red")
    blue = Color("blue")
    print("Mix:", red.mix(blue).to_string())
    print("Complement of red:", red.complement.hex)
    print("Range:", [c.hex for c in red.range(blue, 5)])
    print("Rainbow:", [c.hex for c in Color.rainbow(6)])
    print("Random:", Color.random().to_css())


if __name__ == "__main__":
    demonstrate_parsing()
    demonstrate_derivations()
