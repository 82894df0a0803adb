from seed_demo import seed, MACHINES, LOGS
from mechcare.core.store import JsonFileStore


def test_seed_is_idempotent(data_file):
    seed(data_file)
    seed(data_file)

    data = JsonFileStore(data_file).load()
    assert sorted(m["name"] for m in data["machines"]) == sorted(m["name"] for m in MACHINES)
    assert len(data["logs"]) == len(LOGS)
