from briefdeck.core.ai_generators import parse_completion
from briefdeck.core.deck_normalizer import deck_from_model_output, normalize_deck, normalize_slide
from briefdeck.schemas.deck import Deck, Slide


class TestParseCompletion:

    def test_object_is_returned(self):
        assert parse_completion('{"deck": {"theme": "white"}}') == {"deck": {"theme": "white"}}

    def test_invalid_json_is_empty(self):
        assert parse_completion("```json\n{oops}\n```") == {}

    def test_empty_or_missing_text_is_empty(self):
        assert parse_completion("") == {}
        assert parse_completion(None) == {}

    def test_non_object_json_is_empty(self):
        assert parse_completion("[1, 2, 3]") == {}
        assert parse_completion('"deck"') == {}


class TestNormalizeSlide:

    def test_keeps_well_typed_fields(self):
        slide = normalize_slide({
            "title": "Market",
            "subtitle": "TAM / SAM / SOM",
            "bullets": ["$4B TAM", "12% CAGR"],
            "imageQuery": "city skyline",
            "notes": "Pause here",
        })

        assert slide == Slide(
            title="Market",
            subtitle="TAM / SAM / SOM",
            bullets=["$4B TAM", "12% CAGR"],
            image_query="city skyline",
            notes="Pause here",
        )

    def test_drops_mistyped_fields(self):
        slide = normalize_slide({"title": 42, "bullets": ["ok", 3, None, "fine"], "imageQuery": ["a"]})

        assert slide.title is None
        assert slide.bullets == ["ok", "fine"]
        assert slide.image_query is None

    def test_non_list_bullets_are_dropped(self):
        assert normalize_slide({"bullets": "one, two"}).bullets is None

    def test_non_object_becomes_empty_slide(self):
        assert normalize_slide("Problem") == Slide()
        assert normalize_slide(None) == Slide()


class TestNormalizeDeck:

    def test_defaults_for_missing_deck(self):
        assert normalize_deck(None) == Deck(theme="night", ratio="16:9", slides=[])

    def test_valid_theme_and_ratio_kept(self):
        deck = normalize_deck({"theme": "solarized", "ratio": "4:3", "slides": []})
        assert (deck.theme, deck.ratio) == ("solarized", "4:3")

    def test_invalid_theme_and_ratio_replaced(self):
        deck = normalize_deck({"theme": "Night", "ratio": "21:9"})
        assert (deck.theme, deck.ratio) == ("night", "16:9")

    def test_slide_positions_survive_junk_entries(self):
        deck = normalize_deck({"slides": [{"title": "One"}, "junk", {"title": "Three"}]})
        assert [s.title for s in deck.slides] == ["One", None, "Three"]

    def test_model_output_never_carries_image_urls(self):
        deck = deck_from_model_output(
            {"deck": {"slides": [{"title": "x", "imageUrl": "https://evil.example/pixel.gif"}]}}
        )
        assert deck.slides[0].image_url is None

    def test_model_output_without_deck_key(self):
        assert deck_from_model_output({"slides": [{"title": "x"}]}) == Deck()
