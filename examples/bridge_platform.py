import asyncio

from passkey_sdk import AuthContext, BridgePlatform, Settings


async def invoke(identifier, *args):
    # Stand-in for the host's script channel: the browser cancels every prompt.
    print(f"invoke {identifier} {args}")
    if identifier == "passkeyHelper.isSupported":
        return True
    return {"error": {"name": "NotAllowedError", "message": "The operation was cancelled."}}


async def main():
    context = AuthContext.create(Settings(password_delay=0), platform=BridgePlatform(invoke))
    context.start()

    outcome = await context.orchestrator.register_passkey("bob")
    print(outcome.error_message)

    context.stop()


if __name__ == "__main__":
    asyncio.run(main())
