from particle import Particle
from particle_store import ParticleStore


def make_particle(x=0.0):
    return Particle((x, 0.0), (0.0, 0.0), 5)


def test_insert_assigns_increasing_ids():
    store = ParticleStore()
    ids = [store.insert(make_particle()) for _ in range(3)]
    assert ids == [1, 2, 3]
    assert len(store) == 3
    assert all(pid in store for pid in ids)
    assert store.get(2).id == 2


def test_ids_are_not_reused_after_clear():
    store = ParticleStore()
    store.insert(make_particle())
    store.insert(make_particle())
    store.clear()
    assert len(store) == 0
    assert store.insert(make_particle()) == 3


def test_for_each_mutable_visits_every_particle_once():
    store = ParticleStore()
    for i in range(20):
        store.insert(make_particle(float(i)))

    visits = []

    def fn(particle):
        visits.append(particle.id)
        particle.position[1] += 1.0
        return False

    removed = store.for_each_mutable(fn)
    assert removed == 0
    assert sorted(visits) == list(range(1, 21))
    assert all(p.position[1] == 1.0 for p in store)


def test_removal_during_traversal_does_not_skip_others():
    store = ParticleStore()
    for i in range(20):
        store.insert(make_particle(float(i)))

    visits = []

    def fn(particle):
        visits.append(particle.id)
        return particle.id % 2 == 0

    removed = store.for_each_mutable(fn)
    assert removed == 10
    assert sorted(visits) == list(range(1, 21))
    assert sorted(store.ids()) == list(range(1, 21, 2))


def test_inserting_during_traversal_is_not_visited():
    store = ParticleStore()
    store.insert(make_particle())
    visits = []

    def fn(particle):
        visits.append(particle.id)
        store.insert(make_particle())
        return False

    store.for_each_mutable(fn)
    assert visits == [1]
    assert len(store) == 2
