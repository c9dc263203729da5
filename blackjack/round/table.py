"""Blackjack round engine with state machine."""

import logging
from random import Random
from typing import Callable

from transitions import Machine

from blackjack.cards import Card, Deck, shuffled_deck
from blackjack.hand import Outcome
from blackjack.player import DEFAULT_STAKE, InsufficientBalance, Player
from blackjack.round.events import EventEmitter, EventType, GameEvent
from blackjack.round.state import RoundState

logger = logging.getLogger(__name__)

DeckFactory = Callable[[Random], Deck]


class Table:
    """
    One dealer, one player, one deck: the round engine.

    Completely UI-agnostic. User actions (``deal``, ``hit``, ``stand``,
    ``reset``) are called between ticks; ``update`` is called once per tick
    and drives the dealer's turn. The round only resolves once
    ``is_presentation_settled`` reports that every dealt card has landed.

    ``TRANSITIONS`` is the whole round lifecycle. Firing a trigger from a
    state it does not leave is a no-op that returns False.
    """

    DEALER_STANDS_ON = 17

    STATES = [s.name.lower() for s in RoundState]

    TRANSITIONS = [
        {"trigger": "start_round", "source": "betting", "dest": "player_acting"},
        {
            "trigger": "player_done",
            "source": "player_acting",
            "dest": "dealer_acting",
            "after": "_reveal_hole_card",
        },
        {
            "trigger": "resolve",
            "source": "dealer_acting",
            "dest": "resolved",
            "conditions": "_ready_to_resolve",
            "after": "settle",
        },
        {"trigger": "clear_table", "source": ["betting", "resolved"], "dest": "betting"},
    ]

    def __init__(
        self,
        deck_factory: DeckFactory = shuffled_deck,
        rng: Random | None = None,
        seed: int | None = None,
        starting_balance: int = DEFAULT_STAKE,
        is_presentation_settled: Callable[[], bool] | None = None,
    ) -> None:
        """
        Initialize a table with empty hands, waiting for a bet.

        Args:
            deck_factory: Builds a fresh deck from the table's random source
            rng: Random source for shuffling (overrides ``seed``)
            seed: Seed for a private random source, for reproducible games
            starting_balance: Player's stake
            is_presentation_settled: Predicate guarding the final transition;
                defaults to always settled (headless play)
        """
        self._rng = rng or Random(seed)
        self._deck_factory = deck_factory
        self.deck = deck_factory(self._rng)

        self.player = Player(name="Player", balance=starting_balance)
        self.dealer = Player(name="Dealer", balance=0)
        self.events = EventEmitter()
        self.is_presentation_settled = is_presentation_settled or (lambda: True)

        self.outcome: Outcome | None = None
        self._dealer_announced = False

        self.machine = Machine(
            model=self,
            states=self.STATES,
            transitions=self.TRANSITIONS,
            initial="betting",
            auto_transitions=False,
            ignore_invalid_triggers=True,
            model_attribute="_machine_state",
        )

    @property
    def state(self) -> RoundState:
        """Get current round state as enum."""
        return RoundState[self._machine_state.upper()]  # type: ignore

    def subscribe(
        self,
        handler: Callable[[GameEvent], None],
        event_type: EventType | None = None,
    ) -> None:
        """Subscribe to round events."""
        self.events.subscribe(handler, event_type)

    # User actions

    def deal(self, bet: int = 0) -> bool:
        """
        Place a bet and deal the opening cards.

        Deals player, dealer, player, dealer (face down).

        Returns:
            True if the round started
        """
        if self.state != RoundState.BETTING:
            self._reject("Cannot deal in current state")
            return False

        try:
            self.player.place_bet(bet)
        except InsufficientBalance as exc:
            logger.info("Bet of %d refused, balance is %d", exc.required, exc.available)
            self.events.emit_new(
                EventType.INSUFFICIENT_FUNDS,
                required=exc.required,
                available=exc.available,
            )
            return False
        except ValueError as exc:
            self._reject(str(exc))
            return False

        if bet:
            self.events.emit_new(EventType.BET_PLACED, amount=bet, balance=self.player.balance)

        self.start_round()

        self._deal_card_to(self.player)
        self._deal_card_to(self.dealer)
        self._deal_card_to(self.player)
        self._deal_card_to(self.dealer, face_up=False)

        logger.info("Round started: player %s, bet %d", self.player.hand, self.player.bet)
        self.events.emit_new(EventType.ROUND_STARTED, bet=self.player.bet)
        return True

    def hit(self) -> bool:
        """Player takes another card. Busting ends the player's turn."""
        if not self.can_hit:
            self._reject("Cannot hit now")
            return False

        self._deal_card_to(self.player)
        self.events.emit_new(EventType.PLAYER_HIT, hand_value=self.player.hand_value)

        if self.player.is_busted:
            self.player.standing = True
            self.events.emit_new(EventType.PLAYER_BUSTS, hand_value=self.player.hand_value)
            self.player_done()

        return True

    def stand(self) -> bool:
        """Player keeps the current hand; the dealer takes over."""
        if not self.can_stand:
            self._reject("Cannot stand now")
            return False

        self.player.standing = True
        self.events.emit_new(EventType.PLAYER_STAND, hand_value=self.player.hand_value)
        self.player_done()
        return True

    def reset(self, bet: int = 0) -> bool:
        """
        Clear both hands, take a fresh deck and deal anew.

        Only allowed between rounds; a bet in play is never discarded.

        Returns:
            True if the new round was dealt
        """
        if self.state not in (RoundState.BETTING, RoundState.RESOLVED):
            self._reject("Cannot reset during a round")
            return False

        self.player.reset_hand()
        self.dealer.reset_hand()
        self.deck = self._deck_factory(self._rng)
        self.outcome = None
        self._dealer_announced = False
        self.clear_table()

        return self.deal(bet)

    # Per-tick update

    def update(self) -> RoundState:
        """
        Advance the round by one tick.

        During the dealer's turn, draws at most one card per tick. Once no
        draw is due, resolves as soon as the presentation has settled.
        """
        if self.state == RoundState.DEALER_ACTING:
            if self._dealer_should_draw():
                self._deal_card_to(self.dealer)
                self.events.emit_new(EventType.DEALER_HITS, hand_value=self.dealer.hand_value)
            else:
                self._announce_dealer()
                self.resolve()
        return self.state

    def play_out(self) -> RoundState:
        """Finish the dealer's turn immediately instead of one card per tick."""
        while self.state == RoundState.DEALER_ACTING and self._dealer_should_draw():
            self.update()
        return self.update()

    # Settlement

    def settle(self) -> Outcome | None:
        """
        Apply the round outcome to the player's balance.

        Idempotent: a resolved round pays out exactly once and later calls
        return the recorded outcome. Returns None before the round resolves.
        """
        if self.state != RoundState.RESOLVED:
            return None
        if self.outcome is not None:
            return self.outcome

        outcome = self.player.outcome_against(self.dealer)
        bet = self.player.bet

        if outcome is Outcome.WIN:
            amount = self.player.win()
            self.events.emit_new(EventType.PLAYER_WINS, bet=bet, amount=amount)
        elif outcome is Outcome.PUSH:
            self.player.push()
            self.events.emit_new(EventType.PUSH, bet=bet)
        else:
            self.player.lose()
            self.events.emit_new(EventType.PLAYER_LOSES, bet=bet)

        assert self.player.bet == 0
        self.outcome = outcome

        logger.info(
            "Round resolved: %s (player %d, dealer %d), balance %d",
            outcome.value,
            self.player.hand_value,
            self.dealer.hand_value,
            self.player.balance,
        )
        self.events.emit_new(
            EventType.ROUND_ENDED,
            outcome=outcome.value,
            balance=self.player.balance,
        )
        return outcome

    @property
    def message(self) -> str | None:
        """Outcome text for display, once the round is resolved."""
        if self.outcome is None:
            return None
        if self.outcome is Outcome.LOSE:
            return "Bust! Dealer wins." if self.player.is_busted else "Dealer wins."
        if self.outcome is Outcome.WIN:
            return "Dealer busts! You win!" if self.dealer.is_busted else "You win!"
        return "Push."

    # Queries

    @property
    def can_hit(self) -> bool:
        return self.state == RoundState.PLAYER_ACTING and not self.player.standing

    @property
    def can_stand(self) -> bool:
        return self.can_hit

    @property
    def can_deal(self) -> bool:
        return self.state in (RoundState.BETTING, RoundState.RESOLVED)

    @property
    def hole_card_hidden(self) -> bool:
        """The dealer's second card stays face down until the player is done."""
        return self.state == RoundState.PLAYER_ACTING

    @property
    def dealer_total(self) -> int | None:
        """Dealer's hand value, or None while it is hidden."""
        if self.hole_card_hidden:
            return None
        return self.dealer.hand_value

    # Internals

    def _deal_card_to(self, player: Player, face_up: bool = True) -> Card:
        """Deal a card to a player, announcing any refill of the deck."""
        if not len(self.deck):
            self.events.emit_new(EventType.DECK_RESHUFFLED)
        card = player.draw_card(self.deck)
        role = "dealer" if player is self.dealer else "player"
        logger.debug("Dealt %s to %s", card if face_up else "hole card", role)
        self.events.emit_new(
            EventType.CARD_DEALT,
            card=str(card) if face_up else "??",
            hand=role,
            hand_value=player.hand_value if face_up else None,
        )
        return card

    def _reveal_hole_card(self) -> None:
        if len(self.dealer.hand) >= 2:
            self.events.emit_new(
                EventType.DEALER_REVEALS,
                card=str(self.dealer.hand.cards[1]),
                hand_value=self.dealer.hand_value,
            )

    def _dealer_should_draw(self) -> bool:
        """Dealer draws below 17, and not at all once the player has busted."""
        if self.player.is_busted:
            return False
        return self.dealer.hand_value < self.DEALER_STANDS_ON

    def _announce_dealer(self) -> None:
        if self._dealer_announced or self.player.is_busted:
            return
        self._dealer_announced = True
        if self.dealer.is_busted:
            self.events.emit_new(EventType.DEALER_BUSTS, hand_value=self.dealer.hand_value)
        else:
            self.events.emit_new(EventType.DEALER_STANDS, hand_value=self.dealer.hand_value)

    def _ready_to_resolve(self) -> bool:
        return not self._dealer_should_draw() and self.is_presentation_settled()

    def _reject(self, message: str) -> None:
        logger.debug("Rejected action in %s: %s", self.state, message)
        self.events.emit_new(
            EventType.INVALID_ACTION,
            message=message,
            state=self.state.name,
        )
