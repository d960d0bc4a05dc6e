# particle_store.py

import logging

logger = logging.getLogger("dot_loading")

class ParticleStore:
    """
    Owns every live particle, keyed by a unique id.

    Data Contract:
    - insert(particle) -> int: assigns the next id (starting at 1) to the
      particle and stores it. Ids are never reused, not even after clear().
    - for_each_mutable(fn) -> int: calls fn(particle) once per stored
      particle. fn may mutate the particle in place and returns a truthy value
      to have it removed. Removals are applied after the traversal, so no
      entry is skipped or visited twice. Returns the number removed.
    - clear(): drops every particle at once.
    - get(particle_id) / ids(): read-only lookups by id, for inspection.
    - Invariants: iteration order is unspecified.
    """
    def __init__(self):
        self._particles = {}
        self._next_id = 0

    def __len__(self):
        return len(self._particles)

    def __iter__(self):
        return iter(list(self._particles.values()))

    def __contains__(self, particle_id):
        return particle_id in self._particles

    def get(self, particle_id):
        return self._particles.get(particle_id)

    def ids(self):
        return list(self._particles.keys())

    def insert(self, particle) -> int:
        self._next_id += 1
        particle.id = self._next_id
        self._particles[particle.id] = particle
        return particle.id

    def for_each_mutable(self, fn) -> int:
        doomed = [pid for pid, particle in list(self._particles.items()) if fn(particle)]
        for pid in doomed:
            self._particles.pop(pid, None)
        return len(doomed)

    def clear(self):
        count = len(self._particles)
        self._particles.clear()
        if count:
            logger.debug(f"ParticleStore cleared, {count} particle(s) dropped.")
