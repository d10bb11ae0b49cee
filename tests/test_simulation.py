from datetime import date

from conftest import EVERY_DAY

from habitcheck.core.simulation import (
    StreakStateMachine,
    count_opportunities,
    simulate_schedule
)
from habitcheck.models import StreakStatus, TransitionKind


def kinds(transitions):
    return [t.kind for t in transitions]


def test_state_machine_full_cycle():
    machine = StreakStateMachine()
    d = date(2023, 1, 1)
    steps = [machine.step(d, completed) for completed in (True, True, False, True, True, False, False, False)]

    assert kinds(steps) == [
        TransitionKind.RESTART,
        TransitionKind.EXTEND,
        TransitionKind.FRACTURE,
        TransitionKind.RECOVERY_STEP,
        TransitionKind.RECOVERED,
        TransitionKind.FRACTURE,
        TransitionKind.COLLAPSE,
        TransitionKind.IDLE,
    ]
    assert steps[4].recovery_steps == 2
    assert steps[0].recovery_steps == 1
    assert machine.status == StreakStatus.RESET


def test_recovery_interrupted_by_miss_collapses():
    machine = StreakStateMachine()
    d = date(2023, 1, 1)
    for completed in (True, False, True):
        machine.step(d, completed)

    transition = machine.step(d, False)
    assert transition.previous == StreakStatus.FRACTURED
    assert transition.kind == TransitionKind.COLLAPSE
    assert machine.recovery_step == 0


def test_simulation_skips_unscheduled_days():
    completed = {date(2023, 1, 2), date(2023, 1, 4)}
    transitions = list(simulate_schedule({1, 3, 5}, completed, date(2023, 1, 1), date(2023, 1, 7)))

    assert [t.day for t in transitions] == [date(2023, 1, 2), date(2023, 1, 4), date(2023, 1, 6)]
    assert [t.weekday for t in transitions] == [1, 3, 5]
    assert transitions[-1].kind == TransitionKind.FRACTURE


def test_grace_day_pending_yields_nothing():
    completed = {date(2023, 1, 1)}
    transitions = list(simulate_schedule(EVERY_DAY, completed, date(2023, 1, 1), date(2023, 1, 2),
                                         grace_day=date(2023, 1, 2)))

    assert kinds(transitions) == [TransitionKind.RESTART]


def test_grace_day_completed_is_applied():
    completed = {date(2023, 1, 1), date(2023, 1, 2)}
    transitions = list(simulate_schedule(EVERY_DAY, completed, date(2023, 1, 1), date(2023, 1, 2),
                                         grace_day=date(2023, 1, 2)))

    assert kinds(transitions) == [TransitionKind.RESTART, TransitionKind.EXTEND]


def test_count_opportunities_tallies_skips():
    skips = [0] * 7
    completed = {date(2023, 1, 2)}

    opportunities, done = count_opportunities({1, 3}, completed, date(2023, 1, 1), date(2023, 1, 11), skips)

    # Пн 2, Ср 4, Пн 9, Ср 11
    assert (opportunities, done) == (4, 1)
    assert skips == [0, 1, 0, 2, 0, 0, 0]


def test_count_opportunities_empty_range():
    assert count_opportunities(EVERY_DAY, set(), date(2023, 1, 5), date(2023, 1, 1)) == (0, 0)
