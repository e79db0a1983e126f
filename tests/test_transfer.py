import pytest
from pydantic import ValidationError

from simulation import InsufficientFundsError, Mode, Origin, PreconditionError, Severity

from conftest import TOKEN


def narrative(simulator):
    # skip the login entry
    return [(e.severity, e.message) for e in simulator.log.entries()[1:]]


def test_vulnerable_legitimate(simulator):
    simulator.login()
    outcome = simulator.simulate_transfer(Origin.LEGITIMATE, 100)

    assert outcome.allowed
    assert outcome.balance == 900
    assert narrative(simulator) == [
        (Severity.INFO, "📤 Legitimate request from YourBank.com"),
        (Severity.INFO, "🍪 Cookie: session=abc123 (sent automatically)"),
        (Severity.SUCCESS, "✅ Transfer successful! $100 sent"),
    ]


def test_vulnerable_malicious(simulator):
    simulator.login()
    outcome = simulator.simulate_transfer(Origin.MALICIOUS, 500)

    assert outcome.allowed
    assert simulator.state().balance == 500
    assert narrative(simulator) == [
        (Severity.DANGER, "🚨 Malicious request from EvilSite.com"),
        (Severity.WARNING, "🍪 Cookie: session=abc123 (browser sends automatically!)"),
        (Severity.WARNING, "⚠️ No CSRF protection - request looks legitimate!"),
        (Severity.DANGER, "💸 Transfer successful! You just got hacked!"),
    ]


def test_protected_legitimate(protected):
    protected.login()
    outcome = protected.simulate_transfer(Origin.LEGITIMATE, 100)

    assert outcome.allowed
    assert protected.state().balance == 900
    assert narrative(protected) == [
        (Severity.INFO, "📤 Legitimate request from YourBank.com"),
        (Severity.INFO, "🍪 Cookie: session=abc123 (sent automatically)"),
        (Severity.INFO, f"🔑 Header: X-CSRF-TOKEN={TOKEN} (added by your JS)"),
        (Severity.SUCCESS, "✅ Server validated: Cookie token matches header token"),
        (Severity.SUCCESS, "✅ Transfer successful! $100 sent"),
    ]


def test_protected_malicious_is_blocked(protected):
    protected.login()
    outcome = protected.simulate_transfer(Origin.MALICIOUS, 500)

    assert not outcome.allowed
    assert protected.state().balance == 1000
    assert narrative(protected) == [
        (Severity.DANGER, "🚨 Malicious request from EvilSite.com"),
        (Severity.WARNING, "🍪 Cookie: session=abc123 (browser sends automatically!)"),
        (Severity.DANGER, "❌ Header: X-CSRF-TOKEN=missing (attacker can't read cookie!)"),
        (Severity.DANGER, "🛡️ Server rejected: No CSRF token in header"),
        (Severity.SUCCESS, "❌ Transfer blocked!"),
    ]


def test_protected_blocks_every_attack(protected):
    protected.login()
    for _ in range(5):
        protected.simulate_transfer(Origin.MALICIOUS, 1000)
    assert protected.state().balance == 1000


def test_origin_accepts_strings(simulator):
    simulator.login()
    simulator.simulate_transfer("malicious", 250)
    assert simulator.state().balance == 750


def test_transfer_while_logged_out(make_simulator):
    for mode in Mode:
        simulator = make_simulator(mode)
        for origin in Origin:
            with pytest.raises(PreconditionError):
                simulator.simulate_transfer(origin, 100)
        state = simulator.state()
        assert state.balance == 1000
        assert state.log == []


def test_overdraft_is_rejected_without_logging(simulator):
    simulator.login()
    simulator.simulate_transfer(Origin.MALICIOUS, 1000)
    assert simulator.state().balance == 0

    entries_before = len(simulator.log)
    with pytest.raises(InsufficientFundsError) as excinfo:
        simulator.simulate_transfer(Origin.LEGITIMATE, 1)

    assert excinfo.value.amount == 1
    assert excinfo.value.balance == 0
    assert len(simulator.log) == entries_before


@pytest.mark.parametrize("amount", [0, -5, 1.5, "100"])
def test_invalid_amounts(simulator, amount):
    simulator.login()
    with pytest.raises(ValidationError):
        simulator.simulate_transfer(Origin.LEGITIMATE, amount)
    assert simulator.state().balance == 1000


@pytest.mark.parametrize(
    "mode,origin",
    [
        (Mode.VULNERABLE, Origin.LEGITIMATE),
        (Mode.VULNERABLE, Origin.MALICIOUS),
        (Mode.PROTECTED, Origin.LEGITIMATE),
    ],
)
def test_overdraft_on_debiting_paths(make_simulator, mode, origin):
    simulator = make_simulator(mode)
    simulator.login()
    simulator.simulate_transfer(Origin.LEGITIMATE, 900)
    entries_before = len(simulator.log)

    with pytest.raises(InsufficientFundsError):
        simulator.simulate_transfer(origin, 500)

    assert simulator.state().balance == 100
    assert len(simulator.log) == entries_before


def test_protected_attack_above_balance_is_still_blocked(protected):
    protected.login()
    protected.simulate_transfer(Origin.LEGITIMATE, 900)
    entries_before = len(protected.log)

    outcome = protected.simulate_transfer(Origin.MALICIOUS, 500)

    assert not outcome.allowed
    assert protected.state().balance == 100
    blocked = [(e.severity, e.message) for e in protected.log.entries()[entries_before:]]
    assert blocked == [
        (Severity.DANGER, "🚨 Malicious request from EvilSite.com"),
        (Severity.WARNING, "🍪 Cookie: session=abc123 (browser sends automatically!)"),
        (Severity.DANGER, "❌ Header: X-CSRF-TOKEN=missing (attacker can't read cookie!)"),
        (Severity.DANGER, "🛡️ Server rejected: No CSRF token in header"),
        (Severity.SUCCESS, "❌ Transfer blocked!"),
    ]
