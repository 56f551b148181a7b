# Model clients implementing open_session(history, params) -> session.
