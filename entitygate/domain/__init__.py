"""Domain layer - Entity contracts and value objects.

Structure:
- entities/: Shipped entities and their write/create payloads
- protocols/: Ports (entity access, ownership, guards, logging)
- events/: Event signals emitted after successful mutations
- identity: Caller identity value object

The domain layer defines WHAT an entity must provide to be dispatched,
not HOW a store provides it.
"""
