"""Tests for the countdown driver and auto-advance."""

from domain.models import Phase, SessionConfig


def test_start_work_schedules_single_countdown(service, scheduler):
    service.start_work()
    assert scheduler.pending() == 1

    service.start_work()
    service.start_break()
    assert scheduler.pending() == 1


def test_countdown_ticks_every_second(service, scheduler):
    service.start_work()
    scheduler.advance(1000)
    assert service.get_snapshot().remaining_sec == 2
    scheduler.advance(1000)
    assert service.get_snapshot().remaining_sec == 1


def test_restart_does_not_double_tick(service, scheduler):
    service.start_work()
    scheduler.advance(500)
    service.start_work()
    scheduler.advance(1000)
    # one tick from the new countdown only
    assert service.get_snapshot().remaining_sec == 2


def test_suspend_freezes_and_resume_continues(service, scheduler):
    service.start_work()
    scheduler.advance(1000)
    service.suspend()
    scheduler.advance(10_000)
    snap = service.get_snapshot()
    assert snap.is_suspended
    assert snap.remaining_sec == 2

    service.suspend()
    scheduler.advance(1000)
    assert service.get_snapshot().remaining_sec == 1
    assert scheduler.pending() == 1


def test_phase_complete_notifies_and_auto_advances(service, scheduler):
    completed = []
    service.set_on_phase_complete(lambda phase, snap: completed.append((phase, snap.is_idle)))

    service.start_work()
    scheduler.advance(3000)

    assert completed == [(Phase.WORK, True)]
    assert service.has_pending_advance
    assert service.get_snapshot().is_idle

    scheduler.advance(2000)
    snap = service.get_snapshot()
    assert snap.phase is Phase.SHORT_BREAK
    assert snap.is_running
    assert not service.has_pending_advance


def test_break_completion_advances_to_work(service, scheduler, config):
    service.start_break()
    scheduler.advance(config.short_break_sec * 1000 + 2000)
    snap = service.get_snapshot()
    assert snap.phase is Phase.WORK
    assert snap.remaining_sec == config.work_sec
    assert snap.is_running


def test_full_cycle_reaches_long_break(service, scheduler, config):
    phases = []
    service.set_on_phase_complete(lambda phase, snap: phases.append(phase))
    service.start_work()

    # work, short, work, short, work, long
    for _ in range(60):
        scheduler.advance(1000)
        if len(phases) >= 6:
            break

    assert phases == [
        Phase.WORK,
        Phase.SHORT_BREAK,
        Phase.WORK,
        Phase.SHORT_BREAK,
        Phase.WORK,
        Phase.LONG_BREAK,
    ]


def test_manual_start_cancels_pending_advance(service, scheduler):
    service.start_work()
    scheduler.advance(3000)
    assert service.has_pending_advance

    service.start_work()
    assert not service.has_pending_advance

    scheduler.advance(2000)
    snap = service.get_snapshot()
    assert snap.phase is Phase.WORK
    assert snap.remaining_sec == 1


def test_auto_advance_can_be_disabled(config, scheduler):
    from core.session_controller import SessionController
    from services.timer_service import TimerService

    service = TimerService(
        SessionController(config),
        schedule=scheduler.schedule,
        cancel=scheduler.cancel,
        auto_advance=False,
    )
    service.start_work()
    scheduler.advance(10_000)
    assert service.get_snapshot().is_idle
    assert scheduler.pending() == 0


def test_countdown_stops_when_idle(service, scheduler):
    service.start_work()
    scheduler.advance(3000)
    # only the advance job remains
    assert scheduler.pending() == 1


def test_shutdown_cancels_everything(service, scheduler):
    service.start_work()
    service.shutdown()
    assert scheduler.pending() == 0

    service.start_work()
    scheduler.advance(3000)
    service.shutdown()
    assert scheduler.pending() == 0
    assert not service.has_pending_advance


def test_callbacks_receive_snapshots(service, scheduler):
    ticks, states = [], []
    service.set_on_tick(ticks.append)
    service.set_on_state_change(states.append)

    service.start_work()
    scheduler.advance(1000)

    assert states[-1].is_running
    assert [s.remaining_sec for s in ticks] == [3, 2]


def test_update_config_when_idle_refreshes_display(service):
    states = []
    service.set_on_state_change(states.append)
    service.update_config(SessionConfig(work_sec=1500))
    assert service.config.work_sec == 1500
    assert states[-1].remaining_sec == 1500


def test_advance_is_pending_when_listener_is_told(service, scheduler):
    seen = []
    service.set_on_phase_complete(lambda phase, snap: seen.append(service.has_pending_advance))

    service.start_work()
    scheduler.advance(3000)

    assert seen == [True]
