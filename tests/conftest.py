import threading

import pytest

from song_store import SongStore


class FakeResponse:
    def __init__(self, payload=None, status_code=200, json_error=None):
        self.payload = payload
        self.status_code = status_code
        self.json_error = json_error

    @property
    def ok(self):
        return 200 <= self.status_code < 300

    def json(self):
        if self.json_error is not None:
            raise self.json_error
        return self.payload


class FakeSession:
    """Sessione HTTP finta: restituisce (o solleva) quello che le si passa"""

    def __init__(self, result):
        self.result = result
        self.headers = {}
        self.calls = []

    def get(self, url, timeout=None):
        self.calls.append((url, timeout))
        if isinstance(self.result, Exception):
            raise self.result
        return self.result


class FakeClient:
    """Provider finto: restituisce in ordine i risultati indicati"""

    def __init__(self, results, gate=None):
        self.results = list(results)
        self.gate = gate
        self.started = threading.Event()
        self.calls = 0

    def fetch_random_map(self):
        self.calls += 1
        self.started.set()
        if self.gate is not None:
            self.gate.wait(5)
        if not self.results:
            return None
        result = self.results.pop(0)
        if isinstance(result, Exception):
            raise result
        return result


class RecordingStore(SongStore):
    """SongStore reale che registra ogni riscrittura dei file"""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.writes = []

    def persist(self, songs):
        super().persist(songs)
        self.writes.append(list(songs))


def make_song(map_hash, name):
    return {'hash': map_hash, 'songName': name, 'difficulties': []}


@pytest.fixture
def store(tmp_path):
    return RecordingStore(tmp_path / 'random.tmp.json', tmp_path / 'random.bplist')
