"""Unit tests for analyzer pipelines and filters."""

import io

import pytest

from text_boolean_search.search import analyzers
from text_boolean_search.search.analyzers import (
    STOPWORDS,
    AnalyzerPipeline,
    BooleanTermAnalyzer,
    PunctuationStripFilter,
    StopFilter,
    SuffixCollapseFilter,
    Token,
    WhitespaceTokenizer,
    collapse_suffix,
    get_analyzer,
    tokenize,
)


@pytest.fixture
def fresh_registry(monkeypatch):
    """Provide a temporary analyzer registry so tests stay isolated."""

    monkeypatch.setattr(analyzers, "_ANALYZER_FACTORIES", analyzers._ANALYZER_FACTORIES.copy())
    return analyzers._ANALYZER_FACTORIES


def _tokens(*texts: str) -> list[Token]:
    return [Token(text=text, position=idx, start_char=0, end_char=len(text)) for idx, text in enumerate(texts)]


class TestWhitespaceTokenizer:
    """Raw tokens are whitespace-delimited with offsets."""

    def test_splits_on_any_whitespace(self):
        tokens = list(WhitespaceTokenizer()("The  Cat\tsat\nhere"))

        assert [t.text for t in tokens] == ["The", "Cat", "sat", "here"]
        assert [t.position for t in tokens] == [0, 1, 2, 3]
        assert tokens[1].start_char == 5
        assert tokens[1].end_char == 8

    def test_keeps_punctuation_attached(self):
        tokens = list(WhitespaceTokenizer()("end. (start)"))

        assert [t.text for t in tokens] == ["end.", "(start)"]


class TestPunctuationStripFilter:
    """Normalization lowercases and strips the literal punctuation subset."""

    def test_strips_every_occurrence(self):
        filtered = list(PunctuationStripFilter()(_tokens("Cat.", "e-mail:", "a,b;c.d", "x--y")))

        assert [t.text for t in filtered] == ["cat", "email", "abcd", "xy"]

    def test_leaves_other_characters_alone(self):
        filtered = list(PunctuationStripFilter()(_tokens("it's", "(why?)", "C++")))

        assert [t.text for t in filtered] == ["it's", "(why?)", "c++"]

    def test_drops_tokens_left_empty(self):
        filtered = list(PunctuationStripFilter()(_tokens("-", "...", "ok")))

        assert [t.text for t in filtered] == ["ok"]

    def test_reuses_token_when_already_normal(self):
        raw = _tokens("plain")

        filtered = list(PunctuationStripFilter()(raw))

        assert filtered[0] is raw[0]


class TestStopFilter:
    """Stop filters remove exact stopword matches only."""

    def test_default_stopwords(self):
        assert STOPWORDS == frozenset({"the", "of", "an", "a", "to", "at", "in"})

    def test_removes_default_stopwords(self):
        filtered = list(StopFilter()(_tokens("the", "cat", "in", "hat", "and")))

        assert [t.text for t in filtered] == ["cat", "hat", "and"]

    def test_match_is_exact(self):
        filtered = list(StopFilter()(_tokens("then", "inn", "at")))

        assert [t.text for t in filtered] == ["then", "inn"]

    def test_custom_stopwords_override_default_set(self):
        filtered = list(StopFilter(stopwords=["cat"])(_tokens("the", "cat")))

        assert [t.text for t in filtered] == ["the"]


class TestSuffixCollapseFilter:
    """Everything from the first ``ation`` onwards becomes ``e``."""

    @pytest.mark.parametrize(
        ("word", "expected"),
        [
            ("automation", "autome"),
            ("nation", "ne"),
            ("nationalities", "ne"),
            ("ation", "e"),
            ("stationstation", "ste"),
            ("cat", "cat"),
            ("atio", "atio"),
        ],
    )
    def test_collapse_suffix(self, word, expected):
        assert collapse_suffix(word) == expected

    def test_filter_rewrites_tokens(self):
        filtered = list(SuffixCollapseFilter()(_tokens("automation", "dog")))

        assert [t.text for t in filtered] == ["autome", "dog"]


class TestAnalyzerPipeline:
    """Pipelines respect filter order and reset positions."""

    def test_pipeline_reindexes_after_filters(self):
        pipeline = AnalyzerPipeline(WhitespaceTokenizer(), [PunctuationStripFilter(), StopFilter()])

        tokens = pipeline("The Cat - sat")

        assert [t.text for t in tokens] == ["cat", "sat"]
        assert [t.position for t in tokens] == [0, 1]


class TestBooleanTermAnalyzer:
    """The default analyzer chains normalize -> stopwords -> collapse."""

    def test_documented_examples(self):
        analyzer = BooleanTermAnalyzer()

        assert [t.text for t in analyzer("automation")] == ["autome"]
        assert [t.text for t in analyzer("cat.")] == ["cat"]

    def test_stopwords_checked_after_normalization(self):
        analyzer = BooleanTermAnalyzer()

        tokens = analyzer("The. A, -of- cat")

        assert [t.text for t in tokens] == ["cat"]

    def test_stopwords_checked_before_collapse(self):
        analyzer = BooleanTermAnalyzer(stopwords=["autome"])

        tokens = analyzer("automation")

        assert [t.text for t in tokens] == ["autome"]

    def test_can_disable_collapse(self):
        analyzer = BooleanTermAnalyzer(apply_collapse=False)

        tokens = analyzer("Automation")

        assert [t.text for t in tokens] == ["automation"]

    def test_operator_words_are_not_stopwords(self):
        analyzer = BooleanTermAnalyzer()

        tokens = analyzer("cat AND dog Or bird NOT fish")

        assert [t.text for t in tokens] == ["cat", "and", "dog", "or", "bird", "not", "fish"]


class TestTokenize:
    """``tokenize`` accepts strings and streams and is deterministic."""

    def test_accepts_text_stream(self):
        stream = io.StringIO("A Dog and Cat ran.\nThe station")

        assert tokenize(stream) == ["dog", "and", "cat", "ran", "ste"]

    def test_is_deterministic(self):
        text = "Information retrieval: the automation of search, in short."

        first = tokenize(text)
        second = tokenize(io.StringIO(text))

        assert first == second
        assert first == ["informe", "retrieval", "autome", "search", "short"]

    def test_empty_input(self):
        assert tokenize("") == []
        assert tokenize("   \n\t") == []


class TestAnalyzerRegistry:
    """Analyzer registry lookups are validated."""

    def test_get_analyzer_defaults_to_boolean(self):
        assert isinstance(get_analyzer(None), BooleanTermAnalyzer)

    def test_get_analyzer_is_case_insensitive(self):
        analyzer = get_analyzer("BOOLEAN-NOCOLLAPSE")

        assert [t.text for t in analyzer("automation")] == ["automation"]

    def test_get_analyzer_unknown_name_raises(self, fresh_registry):
        with pytest.raises(ValueError, match="Unknown analyzer"):
            get_analyzer("missing")
