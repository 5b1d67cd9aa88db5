import asyncio

from passkey_sdk import AuthContext, Settings


async def main():
    context = AuthContext.create(Settings(origin="https://localhost", password_delay=0))
    context.start()

    @context.on_session_changed()
    def on_session_changed(username: str):
        print(f"Session changed: {username or '(signed out)'}")

    outcome = await context.orchestrator.register_passkey("alice")
    print(outcome.message or outcome.error_message)

    outcome = await context.orchestrator.authenticate_passkey("alice")
    print(outcome.message or outcome.error_message)

    for summary in context.orchestrator.list_passkeys():
        print(f"{summary.username}: registered {summary.created_at.isoformat()}")

    context.orchestrator.logout()
    context.stop()


if __name__ == "__main__":
    asyncio.run(main())
