"""Simple entrypoint to print today's outfit from the local wardrobe."""

from fitpick_app.app import FitPickApp


def main() -> None:
    app = FitPickApp()
    outfit = app.generate_outfit()
    print(f"{outfit.weather.value}, {outfit.temperature:.0f}C")
    for slot in ("top", "bottom", "shoes", "outer"):
        piece = getattr(outfit, slot)
        if piece is None:
            continue
        if piece.is_ghost:
            print(f"{slot}: {piece.label}")
        else:
            print(f"{slot}: #{piece.item_id} {piece.color_code} {piece.sub_type or piece.category}")


if __name__ == "__main__":
    main()
