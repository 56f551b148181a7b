# Starts the Chat Relay API with auto-reload for local work.
# Without GEMINI_API_KEY in the environment or .env, /chat answers via the echo client.

import uvicorn

if __name__ == "__main__":
    uvicorn.run("chat_relay.app:app", host="0.0.0.0", port=8000, reload=True)
