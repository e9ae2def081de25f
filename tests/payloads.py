"""Sample third-party payloads shared by the test modules."""

RANDOM_USER = {
    "gender": "female",
    "name": {"title": "Ms", "first": "Aigerim", "last": "Nurlanovna"},
    "location": {
        "street": {"number": 42, "name": "Abay Avenue"},
        "city": "Almaty",
        "country": "Kazakhstan",
    },
    "dob": {"date": "1990-04-12T08:00:00.000Z", "age": 36},
    "picture": {"large": "https://img.test/l.jpg", "medium": "https://img.test/m.jpg"},
}

GERMANY = {
    "name": {"common": "Germany", "official": "Federal Republic of Germany"},
    "capital": ["Berlin"],
    "languages": {"deu": "German"},
    "currencies": {"EUR": {"name": "Euro", "symbol": "€"}},
    "flags": {"png": "https://flags.test/de.png", "svg": "https://flags.test/de.svg"},
    "flag": "🇩🇪",
}

