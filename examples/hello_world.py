"""
unix_clock — Hello World

A live UNIX timestamp plus a future timestamp a selected period ahead.
Pause freezes it, resume resynchronizes, editing the base freezes it.
"""

import asyncio

from unix_clock import ClockSession, CommandClipboard, CopyFeedback, render


def show(label: str, session: ClockSession) -> None:
    view = render(session.engine)
    state = "paused" if view.paused else "running"
    print(f"[{label}] ({state}, +{view.period})")
    print(f"  now    {view.now_seconds}  {view.now_zone}: {view.now_local}  UTC: {view.now_utc}")
    print(f"  future {view.future_seconds}  {view.future_zone}: {view.future_local}  UTC: {view.future_utc}")
    print(f"  {view.adding_label}")


async def main():
    # ──────────────────────────────────────
    #  1. Start a session (engine + 1s ticker)
    # ──────────────────────────────────────
    async with ClockSession() as session:
        show("start", session)

        # ──────────────────────────────────────
        #  2. Let it tick, then pick a period
        # ──────────────────────────────────────
        await asyncio.sleep(2.1)
        session.set_period("1h")
        show("after 2s, 1h selected", session)

        # ──────────────────────────────────────
        #  3. Pause — ticks stop landing
        # ──────────────────────────────────────
        session.pause()
        await asyncio.sleep(1.1)
        show("paused", session)

        # ──────────────────────────────────────
        #  4. Manual edits (bad text is ignored)
        # ──────────────────────────────────────
        session.set_base_from_text("not-a-date")
        session.set_base_from_text("2030-01-01T00:00:00")
        show("base edited", session)

        # ──────────────────────────────────────
        #  5. Copy the future timestamp
        # ──────────────────────────────────────
        feedback = CopyFeedback(CommandClipboard())
        copied = await feedback.copy(str(session.engine.get_future_seconds()))
        print(f"  copied to clipboard: {copied}")
        feedback.close()

        # ──────────────────────────────────────
        #  6. Reset — 24h, running, now
        # ──────────────────────────────────────
        session.reset()
        show("reset", session)


if __name__ == "__main__":
    asyncio.run(main())
