"""End-to-end slug transformation tests.

Maps to BDD specs: TestLiteralScenarios, TestDegenerateInput,
TestOutputInvariants, TestIdempotence, TestConcurrentUse
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

import pytest

from slugkit import DEFAULT_OPTIONS, SlugOptions, slugify, transform
from slugkit.options import is_word_char

# Inputs chosen to hit punctuation, numbers, accents, scripts with
# combining marks, ideographs, stopwords and long titles.
_CORPUS = [
    "Hello, World! 123",
    "Café münü",
    "This is a very long title",
    "A guide to programming",
    "The quick brown fox jumps over the lazy dog",
    "Senior Staff Engineer — Platform (Remote)",
    "snake_case_and kebab-case",
    "  leading and trailing   ",
    "Version 2.0 release notes",
    "Ünïcödé — ñoño façade",
    "Москва и Санкт-Петербург",
    "北京 Olympics 2008",
    "हिन्दी भाषा",
    "C++ vs. Rust: a comparison",
    "@#$% ^&* ()",
    "Don\u2019t stop at the U.S.A. border, it's 2.0",
    "\u00bd cup sugar",
    "x",
]

_OPTION_SETS = [
    DEFAULT_OPTIONS,
    SlugOptions(ascii_only=True),
    SlugOptions(remove_stopwords=True),
    SlugOptions(max_length=10),
    SlugOptions(separator="_"),
    SlugOptions(separator=".", max_length=12, ascii_only=True, remove_stopwords=True),
]


class TestLiteralScenarios:
    """REQUIREMENT: Known titles slugify to known slugs.

    WHO: Any caller building URLs or file names from titles
    WHAT: Punctuation is dropped, words are hyphenated and lowercased,
          accents survive unless ascii_only is set, stopwords are removed
          on request, truncation happens at word boundaries, and case is
          kept when lowercase is off
    WHY: Slugs end up in URLs and on disk; a change in output silently
         breaks every link and path built from an older slug
    """

    def test_punctuation_is_dropped_and_numbers_kept(self) -> None:
        """
        When a title has commas, exclamation marks and a number
        Then only the words and the number survive, hyphen-joined
        """
        result = transform("Hello, World! 123")

        assert result == "hello-world-123", f"Expected hello-world-123, got {result!r}"

    def test_accented_letters_survive_by_default(self) -> None:
        """
        When ascii_only is off
        Then accented letters are kept as-is (lowercased)
        """
        result = transform("Café münü", SlugOptions(ascii_only=False))

        assert result == "café-münü", f"Expected accents kept, got {result!r}"

    def test_ascii_only_transliterates_accents(self) -> None:
        """
        When ascii_only is on
        Then accented letters become their plain ASCII equivalent
        """
        result = transform("Café münü", SlugOptions(ascii_only=True))

        assert result == "cafe-munu", f"Expected transliterated slug, got {result!r}"

    def test_max_length_truncates_at_word_boundary(self) -> None:
        """
        When the slug would exceed max_length
        Then whole words are kept up to the limit and none is cut
        """
        result = transform("This is a very long title", SlugOptions(max_length=10))

        assert result == "this-is-a", f"Expected this-is-a, got {result!r}"

    def test_stopwords_are_removed_on_request(self) -> None:
        """
        When remove_stopwords is on
        Then 'a' and 'to' disappear regardless of their case
        """
        result = transform("A guide to programming", SlugOptions(remove_stopwords=True))

        assert result == "guide-programming", f"Expected guide-programming, got {result!r}"

    def test_stopword_removal_preserves_order(self) -> None:
        """
        When a leading stopword is removed
        Then the remaining words keep their original order
        """
        result = transform("The quick brown fox", SlugOptions(remove_stopwords=True))

        assert result == "quick-brown-fox", f"Expected quick-brown-fox, got {result!r}"

    def test_lowercase_off_keeps_original_case(self) -> None:
        """
        When lowercase is off
        Then each word keeps its capitalisation
        """
        result = transform("Hello World", SlugOptions(lowercase=False))

        assert result == "Hello-World", f"Expected Hello-World, got {result!r}"

    def test_symbols_only_tail_is_dropped(self) -> None:
        """
        When the title ends in a run of symbols
        Then the symbols leave no trace, not even a trailing separator
        """
        result = transform("Hello, World! @#$%")

        assert result == "hello-world", f"Expected hello-world, got {result!r}"

    def test_custom_separator_joins_words(self) -> None:
        """
        When the separator is an underscore
        Then words are joined with underscores
        """
        result = transform("Hello World", SlugOptions(separator="_"))

        assert result == "hello_world", f"Expected hello_world, got {result!r}"

    def test_underscore_in_input_is_a_word_boundary(self) -> None:
        """
        When the input uses snake_case
        Then underscores split words like any other punctuation
        """
        result = transform("snake_case_name")

        assert result == "snake-case-name", f"Expected snake-case-name, got {result!r}"

    def test_decomposed_accent_matches_precomposed(self) -> None:
        """
        When an accent arrives as a separate combining character
        Then the slug equals the one built from the precomposed letter
        """
        decomposed = transform("Cafe\u0301")
        precomposed = transform("Caf\u00e9")

        assert decomposed == precomposed == "café", (
            f"Expected both forms to give 'café', got {decomposed!r} and {precomposed!r}"
        )

    def test_ideographs_are_dropped_in_ascii_mode(self) -> None:
        """
        When ascii_only is on and the title contains CJK ideographs
        Then the ideographs vanish without leaving a placeholder
        """
        result = transform("北京 Olympics 2008", SlugOptions(ascii_only=True))

        assert result == "olympics-2008", f"Expected ideographs dropped, got {result!r}"

    def test_ideographs_are_kept_without_ascii_mode(self) -> None:
        """
        When ascii_only is off
        Then ideographs are kept, each one a word of its own
        """
        result = transform("北京 Olympics")

        assert result == "北-京-olympics", f"Expected ideographs kept, got {result!r}"

    def test_cyrillic_is_romanised_in_ascii_mode(self) -> None:
        """
        When ascii_only is on and the title is Cyrillic
        Then each letter is replaced by its Latin romanisation
        """
        result = transform("Москва", SlugOptions(ascii_only=True))

        assert result == "moskva", f"Expected moskva, got {result!r}"

    def test_em_dash_still_separates_words_in_ascii_mode(self) -> None:
        """
        When two words are joined only by an em-dash and ascii_only is on
        Then they still come out as two words
        """
        result = transform("Hello—World", SlugOptions(ascii_only=True))

        assert result == "hello-world", f"Expected hello-world, got {result!r}"

    def test_contraction_is_not_split(self) -> None:
        """
        When a title contains a contraction
        Then the apostrophe disappears and the word stays whole
        """
        result = transform("Don't stop")

        assert result == "dont-stop", f"Expected dont-stop, got {result!r}"

    def test_decimal_number_is_not_split(self) -> None:
        """
        When a title contains a version number with a decimal point
        Then the number stays one word without the point
        """
        assert transform("2.0") == "20"
        assert transform("Python 3.12 released") == "python-312-released"

    def test_dotted_abbreviation_is_not_split(self) -> None:
        """
        When a title contains a dotted abbreviation
        Then the letters stay together as one word
        """
        result = transform("U.S.A")

        assert result == "usa", f"Expected usa, got {result!r}"

    def test_typographic_apostrophe_gives_same_slug_in_both_modes(self) -> None:
        """
        When a contraction uses a typographic apostrophe
        Then the slug is the same with and without ascii_only
        """
        plain = transform("Don’t stop")
        ascii_only = transform("Don’t stop", SlugOptions(ascii_only=True))

        assert plain == ascii_only == "dont-stop", (
            f"Expected dont-stop in both modes, got {plain!r} and {ascii_only!r}"
        )

    def test_vulgar_fraction_is_not_read_as_twelve(self) -> None:
        """
        When ascii_only is on and the title contains '½'
        Then its digits come out as two words rather than '12'
        """
        result = transform("½ cup sugar", SlugOptions(ascii_only=True))

        assert result == "1-2-cup-sugar", f"Expected 1-2-cup-sugar, got {result!r}"

    def test_slugify_is_an_alias_of_transform(self) -> None:
        """
        When callers use the conventional slugify name
        Then they get the same function
        """
        assert slugify is transform


class TestDegenerateInput:
    """REQUIREMENT: Inputs without words produce an empty slug, never an error.

    WHO: Batch callers feeding arbitrary user titles
    WHAT: Empty, whitespace-only, punctuation-only and all-stopword input
          return ""; so does a first word longer than max_length
    WHY: An empty slug is a valid outcome the caller can substitute a
         fallback for; an exception mid-batch would lose the whole batch
    """

    @pytest.mark.parametrize("options", _OPTION_SETS)
    def test_empty_string_gives_empty_slug(self, options: SlugOptions) -> None:
        """An empty input is "" under every option set."""
        assert transform("", options) == ""

    @pytest.mark.parametrize("options", _OPTION_SETS)
    def test_whitespace_only_gives_empty_slug(self, options: SlugOptions) -> None:
        """A whitespace-only input is "" under every option set."""
        assert transform("   ", options) == ""
        assert transform("\t\n ", options) == ""

    def test_punctuation_only_gives_empty_slug(self) -> None:
        """Input made solely of punctuation and symbols has no words, so the slug is empty."""
        assert transform("?!... --- ***") == ""

    def test_all_stopwords_gives_empty_slug(self) -> None:
        """
        When stopword removal is on
        Then every stopword goes, and an all-stopword title leaves an
        empty slug — no word is kept back as a minimum
        """
        result = transform("To be or not to be", SlugOptions(remove_stopwords=True))

        assert result == "or-not", f"Expected only non-stopwords, got {result!r}"
        assert transform("The and of", SlugOptions(remove_stopwords=True)) == ""

    def test_first_word_longer_than_limit_gives_empty_slug(self) -> None:
        """
        When the very first word is longer than max_length
        Then nothing fits and the slug is empty rather than a cut word
        """
        result = transform("Supercalifragilistic words", SlugOptions(max_length=5))

        assert result == "", f"Expected empty slug, got {result!r}"


class TestOutputInvariants:
    """REQUIREMENT: Every slug is made of word characters and single separators.

    WHO: URL routers and file systems consuming slugs
    WHAT: Output contains only letters, digits, marks and the separator
          (ASCII letters and digits only under ascii_only); it never starts
          or ends with the separator, never doubles it, and never exceeds
          max_length
    WHY: A slug that breaks these rules produces ugly or invalid URLs and
         file names that differ from slugs built elsewhere
    """

    @pytest.mark.parametrize("options", _OPTION_SETS)
    @pytest.mark.parametrize("text", _CORPUS)
    def test_slug_contains_only_word_chars_and_separator(
        self, text: str, options: SlugOptions
    ) -> None:
        """Every character is either the separator or a word character."""
        result = transform(text, options)
        sep = options.separator

        stray = [c for c in result if c != sep and not is_word_char(c)]
        assert not stray, f"Unexpected characters {stray!r} in {result!r}"
        if options.ascii_only:
            assert all(c == sep or (c.isascii() and c.isalnum()) for c in result), (
                f"Non-ASCII output under ascii_only: {result!r}"
            )

    @pytest.mark.parametrize("options", _OPTION_SETS)
    @pytest.mark.parametrize("text", _CORPUS)
    def test_separator_never_leads_trails_or_doubles(
        self, text: str, options: SlugOptions
    ) -> None:
        """The separator only ever appears singly between two words."""
        result = transform(text, options)
        sep = options.separator

        assert not result.startswith(sep), f"Leading separator in {result!r}"
        assert not result.endswith(sep), f"Trailing separator in {result!r}"
        assert sep * 2 not in result, f"Doubled separator in {result!r}"

    @pytest.mark.parametrize("limit", [1, 3, 5, 8, 13, 40])
    @pytest.mark.parametrize("text", _CORPUS)
    def test_length_never_exceeds_max_length(self, text: str, limit: int) -> None:
        """With max_length = N the slug is at most N characters long."""
        result = transform(text, SlugOptions(max_length=limit))

        assert len(result) <= limit, f"{result!r} is longer than {limit}"

    def test_length_counts_characters_not_bytes(self) -> None:
        """
        When the words contain multi-byte characters
        Then each character counts once toward max_length
        """
        result = transform("münü café", SlugOptions(max_length=9))

        assert result == "münü-café", f"Expected both words to fit in 9 chars, got {result!r}"
        assert len(result.encode("utf-8")) > 9


class TestIdempotence:
    """REQUIREMENT: Slugifying a slug returns the same slug.

    WHO: Callers that cannot tell whether a value was already slugified
    WHAT: transform(transform(x, o), o) == transform(x, o) for the corpus
    WHY: Re-slugifying stored slugs on every save must not drift them
    """

    @pytest.mark.parametrize("options", _OPTION_SETS)
    @pytest.mark.parametrize("text", _CORPUS)
    def test_second_pass_is_a_no_op(self, text: str, options: SlugOptions) -> None:
        """A second pass with the same options changes nothing."""
        once = transform(text, options)
        twice = transform(once, options)

        assert twice == once, f"Second pass changed {once!r} into {twice!r}"


class TestConcurrentUse:
    """REQUIREMENT: One options value can be shared by concurrent calls.

    WHO: Web servers slugifying titles on many worker threads
    WHAT: Running the corpus through a thread pool gives exactly the
          sequential results
    WHY: Options are frozen and the pipeline keeps no shared state, so
         parallel callers need no locking
    """

    def test_thread_pool_matches_sequential_results(self) -> None:
        """Parallel results equal sequential results, in order."""
        options = SlugOptions(ascii_only=True, remove_stopwords=True, max_length=20)
        texts = _CORPUS * 20

        expected = [transform(text, options) for text in texts]
        with ThreadPoolExecutor(max_workers=8) as pool:
            actual = list(pool.map(lambda text: transform(text, options), texts))

        assert actual == expected
