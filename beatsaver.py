import logging
import random

import requests

import settings

logger = logging.getLogger(__name__)


class BeatSaverClient:
    """Client minimale per il feed "latest" di BeatSaver"""

    def __init__(self, base_url=settings.BEATSAVER_BASE_URL, session=None,
                 rng=None, timeout=settings.REQUEST_TIMEOUT):
        self.base_url = base_url.rstrip('/')
        self.session = session or requests.Session()
        self.session.headers.update({'User-Agent': settings.USER_AGENT})
        self.rng = rng or random.Random()
        self.timeout = timeout

    def fetch_latest_page(self, page):
        """Scarica una pagina del feed; None se la richiesta fallisce"""
        url = f"{self.base_url}/maps/latest/{page}"
        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            logger.error(f"[!] BeatSaver non raggiungibile ({url}): {e}")
            return None

        if not response.ok:
            logger.error(f"[X] BeatSaver ha risposto {response.status_code} per {url}")
            return None

        try:
            return response.json()
        except ValueError as e:
            logger.warning(f"[!] Risposta BeatSaver non valida per {url}: {e}")
            return None

    def fetch_random_map(self):
        """
        Sceglie una mappa a caso da una pagina a caso delle ultime uscite.

        Restituisce un record {hash, songName, difficulties} oppure None.
        Non solleva mai eccezioni: ogni errore diventa None.
        """
        page = self.rng.randrange(settings.LATEST_PAGES)
        data = self.fetch_latest_page(page)
        if not isinstance(data, dict):
            return None

        docs = data.get('docs')
        if not isinstance(docs, list) or not docs:
            return None

        entry = self.rng.choice(docs)
        try:
            map_hash = entry['versions'][0]['hash'].upper()
            song_name = entry['metadata']['songName']
        except (KeyError, IndexError, TypeError, AttributeError) as e:
            logger.warning(f"[!] Mappa senza hash o titolo (pagina {page}): {e!r}")
            return None

        if not map_hash:
            return None

        return {'hash': map_hash, 'songName': song_name, 'difficulties': []}
