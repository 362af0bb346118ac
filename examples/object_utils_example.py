"""Minimal example for path based reads, writes and reshaping."""

from objpath import extract, flat, get_path, lower_camel_to_snake_keys, merge, set_path, unflat


def main() -> None:
    """Run a read/write/flatten flow on a small document."""
    person = {
        "firstName": "Rosario",
        "addressList": [{"city": "Springfield", "planet": "earth"}],
    }

    print("city:", get_path(person, "addressList.0.city"))

    updated = set_path(person, "addressList.0.zip", "12345")
    print(f"{updated=}")
    print(f"{person=}")

    print("extract:", extract(person, [{"name": "firstName"}, "addressList.0.planet"]))

    flattened = flat(person)
    print(f"{flattened=}")
    print("unflat:", unflat(flattened))

    print("merged:", merge(person, {"firstName": "Charito", "addressList": []}))
    print("snake keys:", lower_camel_to_snake_keys(person))


if __name__ == "__main__":
    main()
