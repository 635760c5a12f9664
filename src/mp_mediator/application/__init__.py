"""Application layer – CQRS message taxonomy, handler contracts and the mediator."""
