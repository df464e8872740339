from newsbrief.client.render import format_bullets, split_bullets
from newsbrief.client.url_state import article_url_from_path, canonical_path


def test_split_bullets_drops_empty_segments() -> None:
    assert split_bullets("The cat sat. It slept. ") == ["The cat sat", "It slept"]


def test_split_bullets_keeps_final_period_without_trailing_space() -> None:
    assert split_bullets("Harga emas naik hari ini. Analis memperkirakan tren ini berlanjut.") == [
        "Harga emas naik hari ini",
        "Analis memperkirakan tren ini berlanjut.",
    ]


def test_split_bullets_of_empty_buffer() -> None:
    assert split_bullets("") == []


def test_split_bullets_is_idempotent_on_stable_buffer() -> None:
    buffer = "Satu. Dua. Tiga"

    assert split_bullets(buffer) == split_bullets(buffer)


def test_split_bullets_recomputes_partial_sentence() -> None:
    assert split_bullets("The cat s") == ["The cat s"]
    assert split_bullets("The cat sat. It sl") == ["The cat sat", "It sl"]


def test_format_bullets() -> None:
    assert format_bullets(["Satu", "Dua"]) == "• Satu\n• Dua"
    assert format_bullets(["Satu"], marker="-") == "- Satu"


def test_article_url_from_path() -> None:
    assert (
        article_url_from_path(["tech", "example-article"])
        == "https://www.cnbcindonesia.com/tech/example-article"
    )
    assert article_url_from_path([]) is None
    assert article_url_from_path(None) is None
    assert article_url_from_path(["tech", 3]) is None


def test_canonical_path() -> None:
    assert canonical_path("https://www.cnbcindonesia.com/tech/example-article") == "/tech/example-article"
    assert canonical_path("https://www.cnbcindonesia.com") == "/"
