"""Base layer of the client: data model, codec, request pipeline, errors, logging."""
