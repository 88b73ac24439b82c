"""Core logic: key interpreter, session, transition engine and driver."""
