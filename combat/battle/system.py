"""
Combat session manager - runs one encounter from start to outcome.
"""

from __future__ import annotations

import logging
import math
import random
from enum import Enum, auto
from typing import Any, Optional

from engine.core.config import CombatConfig
from engine.core.events import EventBus
from combat.components.session import CombatSession, LogEntryType, Outcome
from combat.components.stats import CombatantStats
from combat.content.definitions import ActionDefinition, EnemyDefinition, ResourceDelta
from combat.battle.actions import apply_action, describe_enemy_action, describe_player_action
from combat.battle.encounters import EncounterSelector
from combat.battle.enemy_ai import EnemyDecisionModule
from combat.battle.interfaces import ContentLookup, ResourceLedger
from combat.battle.results import (
    ActionResult,
    AvailableAction,
    CombatError,
    EndResult,
    RetreatResult,
    StartResult,
)
from combat.battle.rewards import RewardResolver
from combat.battle.status import StatusEffectProcessor

logger = logging.getLogger(__name__)


class CombatEvent(Enum):
    """Notifications published by the session manager."""
    SESSION_STARTED = auto()
    PLAYER_ACTED = auto()
    ENEMY_ACTED = auto()
    LOOT_GRANTED = auto()
    SESSION_ENDED = auto()
    LOG_APPENDED = auto()


END_MESSAGES = {
    Outcome.VICTORY: "Victory! The enemy has been defeated.",
    Outcome.DEFEAT: "Defeat! The Dawn has sustained critical damage.",
    Outcome.RETREAT: "Tactical retreat successful. The Dawn has disengaged.",
}


class CombatSessionManager:
    """
    Owns the current combat session and drives its state machine.

    A session is Active from ``start`` until ``end`` records an outcome,
    after which it is Terminal. Every operation runs to completion before
    returning; a rejected operation returns a result with ``error`` set and
    leaves the session untouched.

    Usage:
        manager = CombatSessionManager(content, ledger, events=bus)
        manager.start("scavenger", region_id="void")
        result = manager.perform_player_action("plasma-cannon")
        if result.outcome == Outcome.VICTORY:
            ...
    """

    def __init__(
        self,
        content: ContentLookup,
        ledger: ResourceLedger,
        events: Optional[EventBus] = None,
        config: Optional[CombatConfig] = None,
        rng: Optional[random.Random] = None,
        player: Optional[CombatantStats] = None,
    ):
        self.content = content
        self.ledger = ledger
        self.events = events
        self.config = config or CombatConfig()

        rng = rng or random.Random()
        self.encounters = EncounterSelector(rng)
        self.enemy_ai = EnemyDecisionModule(content, rng, self.config.default_action_weight)
        self.rewards = RewardResolver(rng)
        self.status = StatusEffectProcessor()

        self._player = player or CombatantStats(
            health=self.config.default_player_health,
            max_health=self.config.default_player_health,
            shield=self.config.default_player_shield,
            max_shield=self.config.default_player_shield,
        )
        self._session: Optional[CombatSession] = None
        self._in_flight = False

    @property
    def session(self) -> Optional[CombatSession]:
        """The current (or most recently ended) session."""
        return self._session

    @property
    def is_active(self) -> bool:
        return self._session is not None and self._session.active

    @property
    def player(self) -> CombatantStats:
        """Player stats carried into the next session."""
        if self._session is not None:
            return self._session.player
        return self._player

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    def start(self, enemy_id: str, region_id: Optional[str] = None) -> StartResult:
        """
        Begin an encounter with an enemy.

        Args:
            enemy_id: Content id of the enemy
            region_id: Region the encounter happens in, if known

        Returns:
            StartResult holding the new session
        """
        if self._in_flight:
            logger.warning(f"Cannot start combat with {enemy_id}: an action is already resolving")
            return StartResult.failure(CombatError.ACTION_IN_PROGRESS, "An action is already resolving")
        if self.is_active:
            logger.warning(f"Cannot start combat with {enemy_id}: a session is already active")
            return StartResult.failure(CombatError.ALREADY_ACTIVE, "Combat is already in progress")

        enemy = self.content.get_enemy(enemy_id)
        if enemy is None:
            logger.warning(f"Cannot start combat: unknown enemy {enemy_id}")
            return StartResult.failure(CombatError.UNKNOWN_ENEMY, f"Unknown enemy: {enemy_id}")

        player = self.player.clone()
        player.clear_statuses()

        session = CombatSession(
            player=player,
            enemy=CombatantStats(
                health=enemy.max_health,
                max_health=enemy.max_health,
                shield=enemy.max_shield,
                max_shield=enemy.max_shield,
            ),
            enemy_id=enemy.id,
            region_id=region_id,
        )
        self._session = session

        region_name = None
        if region_id is not None:
            region = self.content.get_region(region_id)
            region_name = region.display_name if region is not None else region_id
            if enemy.region_affinity and enemy.region_affinity != region_id:
                logger.warning(
                    f"{enemy.id} belongs to {enemy.region_affinity} but was met in {region_id}"
                )

        if region_name:
            self._log(LogEntryType.SYSTEM, f"Combat initiated with {enemy.display_name} in {region_name}")
        else:
            self._log(LogEntryType.SYSTEM, f"Combat initiated with {enemy.display_name}")
        if enemy.is_boss:
            self._log(
                LogEntryType.SYSTEM,
                f"WARNING: {enemy.display_name} is a boss-class threat. Proceed with caution.",
            )
        if enemy.description:
            self._log(LogEntryType.ANALYSIS, enemy.description)

        logger.info(f"Combat started: {enemy.id} (session {session.id})")
        self._publish(CombatEvent.SESSION_STARTED, session=session)
        return StartResult(session=session, message=f"Engaged {enemy.display_name}")

    def end(self, outcome: Outcome) -> EndResult:
        """
        Close the active session with an outcome.

        On victory the enemy's loot is rolled and credited to the ledger.
        """
        if self._in_flight:
            logger.warning(f"Rejected end({outcome.value}): an action is already resolving")
            return EndResult.failure(CombatError.ACTION_IN_PROGRESS, "An action is already resolving")
        return self._end(outcome)

    def _end(self, outcome: Outcome) -> EndResult:
        if not self.is_active:
            return EndResult.failure(CombatError.NOT_ACTIVE, "No active combat")

        session = self._session
        session.outcome = outcome
        session.active = False
        self._log(LogEntryType.SYSTEM, END_MESSAGES[outcome])
        logger.info(f"Combat ended: {outcome.value} against {session.enemy_id} (session {session.id})")

        loot: list[ResourceDelta] = []
        if outcome == Outcome.VICTORY:
            enemy = self.content.get_enemy(session.enemy_id)
            if enemy is not None:
                loot = self._grant_loot(enemy)

        self._publish(CombatEvent.SESSION_ENDED, outcome=outcome, loot=loot)
        return EndResult(outcome=outcome, loot=loot, message=END_MESSAGES[outcome])

    def restore_session(self, data: dict[str, Any]) -> Optional[CombatSession]:
        """
        Replace the current session with one rebuilt from a snapshot.

        Returns:
            The restored session, or None while an action is resolving
        """
        if self._in_flight:
            logger.warning("Rejected restore: an action is already resolving")
            return None

        session = CombatSession.restore(data)
        self._session = session
        logger.info(f"Restored session {session.id} (turn {session.turn})")
        return session

    # -------------------------------------------------------------------------
    # Player commands
    # -------------------------------------------------------------------------

    def perform_player_action(self, action_id: str) -> ActionResult:
        """
        Resolve one full round: the player's action, then the enemy's reply.

        Returns:
            ActionResult describing both sides of the round
        """
        if self._in_flight:
            logger.warning(f"Rejected {action_id}: an action is already resolving")
            return ActionResult.failure(
                CombatError.ACTION_IN_PROGRESS, "An action is already resolving", action_id=action_id
            )
        if not self.is_active:
            logger.warning(f"Rejected {action_id}: no active combat")
            return ActionResult.failure(CombatError.NOT_ACTIVE, "No active combat", action_id=action_id)

        action = self.content.get_action(action_id)
        if action is None:
            logger.warning(f"Rejected {action_id}: unknown action")
            return ActionResult.failure(
                CombatError.UNKNOWN_ACTION, f"Unknown action: {action_id}", action_id=action_id
            )

        session = self._session
        remaining = session.cooldown_for(action_id)
        if remaining > 0:
            logger.warning(f"Rejected {action_id}: on cooldown for {remaining} more turn(s)")
            return ActionResult.failure(
                CombatError.ON_COOLDOWN,
                f"{action.display_name} is on cooldown for {remaining} more turn(s)",
                action_id=action_id,
            )

        if not self._can_afford(action):
            logger.warning(f"Rejected {action_id}: insufficient {action.cost.resource_kind}")
            return ActionResult.failure(
                CombatError.INSUFFICIENT_RESOURCE,
                f"Not enough {action.cost.resource_kind} for {action.display_name}",
                action_id=action_id,
            )

        self._in_flight = True
        try:
            result = self._resolve_round(session, action)
        finally:
            self._in_flight = False

        session.last_action_result = result
        return result

    def retreat(self) -> RetreatResult:
        """
        Disengage from the active session at a resource cost.

        Each penalized resource pool loses ``floor(amount * retreat_penalty)``.
        """
        if self._in_flight:
            return RetreatResult.failure(CombatError.ACTION_IN_PROGRESS, "An action is already resolving")
        if not self.is_active:
            logger.warning("Rejected retreat: no active combat")
            return RetreatResult.failure(CombatError.NOT_ACTIVE, "No active combat")

        penalties = {}
        for kind in self.config.penalized_resources:
            penalty = math.floor(self.ledger.get_amount(kind) * self.config.retreat_penalty)
            if penalty > 0:
                self.ledger.apply_delta(kind, -penalty)
                penalties[kind] = penalty

        percent = round(self.config.retreat_penalty * 100)
        self._log(
            LogEntryType.SYSTEM,
            f"You retreated from combat, losing {percent}% of your resources in the hasty escape.",
        )
        logger.info(f"Retreat penalties: {penalties}")

        self._end(Outcome.RETREAT)
        return RetreatResult(penalties=penalties, message=END_MESSAGES[Outcome.RETREAT])

    def available_actions(self) -> list[AvailableAction]:
        """Player actions with their cooldown and affordability."""
        session = self._session
        return [
            AvailableAction(
                action_id=action.id,
                name=action.display_name,
                cooldown=session.cooldown_for(action.id) if session is not None else 0,
                affordable=self._can_afford(action),
            )
            for action in self.content.actions
        ]

    def roll_encounter(self, region_id: str) -> Optional[str]:
        """
        Roll for an encounter in a region.

        Returns:
            Enemy id to pass to ``start``, or None
        """
        region = self.content.get_region(region_id)
        if region is None:
            logger.warning(f"Cannot roll encounter: unknown region {region_id}")
            return None
        return self.encounters.generate_encounter(region)

    # -------------------------------------------------------------------------
    # Resolution
    # -------------------------------------------------------------------------

    def _resolve_round(self, session: CombatSession, action: ActionDefinition) -> ActionResult:
        cost = action.cost
        self.ledger.apply_delta(cost.resource_kind, -cost.amount)

        outcome = apply_action(session.player, session.enemy, action)
        session.cooldowns[action.id] = action.cooldown

        message = describe_player_action(action.display_name, outcome)
        self._log(LogEntryType.PLAYER, message)

        result = ActionResult(
            message=message,
            action_id=action.id,
            damage_dealt=outcome.damage_dealt,
            shield_damage=outcome.shield_damage,
            health_repaired=outcome.health_repaired,
            shield_repaired=outcome.shield_repaired,
            status_effect_applied=outcome.status_effect_applied,
            resources_consumed=[cost],
        )
        self._publish(CombatEvent.PLAYER_ACTED, result=result)

        if session.enemy.is_defeated:
            ended = self._end(Outcome.VICTORY)
            result.outcome = Outcome.VICTORY
            result.loot = ended.loot
            return result

        enemy = self.content.get_enemy(session.enemy_id)
        if enemy is not None:
            self._enemy_turn(session, enemy, result)
        else:
            logger.warning(f"Enemy {session.enemy_id} vanished from content; skipping its turn")

        if session.player.is_defeated:
            self._end(Outcome.DEFEAT)
            result.outcome = Outcome.DEFEAT
            return result

        self._end_round(session)
        return result

    def _enemy_turn(self, session: CombatSession, enemy: EnemyDefinition, result: ActionResult) -> None:
        move = self.enemy_ai.select_action(enemy, session)
        if move is None:
            self._log(LogEntryType.ENEMY, f"{enemy.display_name} hesitates.")
            return

        outcome = apply_action(session.enemy, session.player, move)
        session.enemy_cooldowns[move.id] = move.cooldown
        self._log(LogEntryType.ENEMY, describe_enemy_action(enemy.display_name, move.display_name, outcome))

        result.enemy_action = move.id
        result.enemy_outcome = outcome
        self._publish(CombatEvent.ENEMY_ACTED, action_id=move.id, outcome=outcome)

    def _end_round(self, session: CombatSession) -> None:
        for cooldowns in (session.cooldowns, session.enemy_cooldowns):
            for action_id, remaining in cooldowns.items():
                if remaining > 0:
                    cooldowns[action_id] = remaining - 1

        self.status.process_round(session)
        session.turn += 1
        logger.debug(f"Session {session.id} advanced to turn {session.turn}")

    def _grant_loot(self, enemy: EnemyDefinition) -> list[ResourceDelta]:
        loot = self.rewards.resolve_loot(enemy)
        for delta in loot:
            self.ledger.apply_delta(delta.resource_kind, delta.amount)
            self._log(
                LogEntryType.SYSTEM,
                f"Recovered {delta.amount} {delta.resource_kind} from the encounter.",
            )
            logger.info(f"Loot granted: {delta.amount} {delta.resource_kind}")
        if loot:
            self._publish(CombatEvent.LOOT_GRANTED, loot=loot)
        return loot

    def _can_afford(self, action: ActionDefinition) -> bool:
        return self.ledger.has_sufficient(action.cost.resource_kind, action.cost.amount)

    # -------------------------------------------------------------------------
    # Output
    # -------------------------------------------------------------------------

    def _log(self, entry_type: LogEntryType, text: str) -> None:
        entry = self._session.add_log(entry_type, text, limit=self.config.battle_log_limit)
        self._publish(CombatEvent.LOG_APPENDED, entry=entry)

    def _publish(self, event_type: CombatEvent, **data: Any) -> None:
        if self.events is None:
            return
        session = self._session
        self.events.publish(
            event_type,
            session_id=session.id if session is not None else None,
            enemy_id=session.enemy_id if session is not None else None,
            **data,
        )
