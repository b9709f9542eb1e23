from futura.kernel.reaction import Capability, Reaction, reaction_job
from futura.kernel.record import SettlementRecord
from futura.kernel.resolving import OneShot


def make_capability(log: list) -> Capability:
    return Capability(
        future=None,  # type: ignore[arg-type]
        resolve=lambda value: log.append(("resolve", value)),
        reject=lambda reason: log.append(("reject", reason)),
    )


def test_settle_returns_matching_reactions_and_clears_lists() -> None:
    record = SettlementRecord()
    capability = make_capability([])
    on_fulfill = Reaction(capability, "fulfill")
    on_reject = Reaction(capability, "reject")
    record.fulfill_reactions.append(on_fulfill)  # type: ignore[union-attr]
    record.reject_reactions.append(on_reject)  # type: ignore[union-attr]

    reactions = record.settle("rejected", "reason")

    assert reactions == [on_reject]
    assert record.state == "rejected"
    assert record.result == "reason"
    assert record.fulfill_reactions is None
    assert record.reject_reactions is None
    assert not record.pending


def test_one_shot_claims_once() -> None:
    flag = OneShot()
    assert not flag.claimed
    assert flag.claim() is True
    assert flag.claim() is False
    assert flag.claimed


def test_reaction_job_pass_through() -> None:
    log = []
    capability = make_capability(log)

    reaction_job(Reaction(capability, "fulfill"), 1)
    reaction_job(Reaction(capability, "reject"), 2)

    assert log == [("resolve", 1), ("reject", 2)]


def test_reaction_job_handler_result_always_resolves() -> None:
    log = []
    capability = make_capability(log)

    reaction_job(Reaction(capability, "reject", handler=lambda reason: reason * 2), 21)

    assert log == [("resolve", 42)]


def test_reaction_job_handler_exception_rejects() -> None:
    log = []
    capability = make_capability(log)
    error = ValueError("x")

    def handler(value):
        raise error

    reaction_job(Reaction(capability, "fulfill", handler=handler), None)

    assert log == [("reject", error)]
