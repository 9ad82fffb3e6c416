"""
Tests for Card values and deck helpers.
"""

import random

import pytest
from pokerroom.core.card import (
    Card, Rank, Suit, ordered_deck, shuffled_deck, deal, parse_cards,
)


class TestCard:
    """Tests for the Card value."""

    def test_card_creation(self, ace_of_spades):
        assert ace_of_spades.rank == Rank.ACE
        assert ace_of_spades.suit == Suit.SPADES

    def test_card_from_string(self):
        """Cards parse from ASCII and symbol notation."""
        assert Card.from_string("As") == Card(Rank.ACE, Suit.SPADES)
        assert Card.from_string("K♥") == Card(Rank.KING, Suit.HEARTS)
        assert Card.from_string("Td") == Card(Rank.TEN, Suit.DIAMONDS)
        assert Card.from_string("10♣") == Card(Rank.TEN, Suit.CLUBS)

    def test_invalid_card_strings(self):
        for bad in ("", "A", "1s", "Ax", "11h"):
            with pytest.raises(ValueError):
                Card.from_string(bad)

    def test_card_is_immutable(self, ace_of_spades):
        with pytest.raises(AttributeError):
            ace_of_spades.rank = Rank.KING

    def test_card_hash_and_equality(self):
        assert Card(Rank.TWO, Suit.CLUBS) == Card(Rank.TWO, Suit.CLUBS)
        assert Card(Rank.TWO, Suit.CLUBS) != Card(Rank.TWO, Suit.HEARTS)
        assert len({Card(Rank.TWO, Suit.CLUBS), Card(Rank.TWO, Suit.CLUBS)}) == 1

    def test_card_display(self):
        """Ten is shown as '10', not 'T'."""
        card = Card(Rank.TEN, Suit.HEARTS)
        assert str(card) == "10♥"
        assert card.short_str == "Th"
        assert card.color == "red"
        assert card.to_dict() == {"rank": "10", "suit": "♥", "text": "10♥", "color": "red"}

    def test_parse_cards(self):
        cards = parse_cards("As Kh 10d")
        assert [c.short_str for c in cards] == ["As", "Kh", "Td"]


class TestDeck:
    """Tests for deck construction and dealing."""

    def test_ordered_deck_has_52_distinct_cards(self):
        deck = ordered_deck()
        assert len(deck) == 52
        assert len(set(deck)) == 52

    def test_shuffled_deck_is_a_permutation(self):
        deck = shuffled_deck(random.Random(7))
        assert len(deck) == 52
        assert set(deck) == set(ordered_deck())

    def test_shuffle_is_reproducible_with_seed(self):
        assert shuffled_deck(random.Random(7)) == shuffled_deck(random.Random(7))
        assert shuffled_deck(random.Random(7)) != shuffled_deck(random.Random(8))

    def test_deal_returns_remainder(self):
        deck = ordered_deck()
        dealt, rest = deal(deck, 3)
        assert dealt == deck[:3]
        assert rest == deck[3:]
        assert len(rest) == 49

    def test_deal_too_many(self):
        _, rest = deal(ordered_deck(), 50)
        with pytest.raises(ValueError):
            deal(rest, 3)
