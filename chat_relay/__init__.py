# Chat Relay package.
