import logging
import threading
from datetime import datetime

import settings
from beatsaver import BeatSaverClient
from song_store import SongStore

logger = logging.getLogger(__name__)


class PlaylistGenerator:
    """
    Aggiunge una mappa casuale alla playlist e la riscrive su disco.

    Un solo ciclo alla volta: il lock viene preso senza attesa all'ingresso,
    chi arriva mentre un ciclo è in corso rinuncia subito.
    """

    def __init__(self, client=None, store=None):
        self.client = client or BeatSaverClient()
        self.store = store or SongStore()
        self._lock = threading.Lock()

    @property
    def generating(self):
        return self._lock.locked()

    def update_playlist(self):
        """Esegue un ciclo completo; False se un altro ciclo è già in corso"""
        if not self._lock.acquire(blocking=False):
            return False
        try:
            self._run_cycle()
        finally:
            self._lock.release()
        return True

    def start_in_background(self):
        """
        Avvia un ciclo su un thread separato senza attenderne la fine.

        Il lock viene preso qui, nel thread del chiamante, così due richieste
        ravvicinate non possono partire entrambe. Restituisce il thread
        avviato, oppure None se un ciclo era già in corso.
        """
        if not self._lock.acquire(blocking=False):
            return None
        try:
            worker = threading.Thread(target=self._run_and_release, daemon=True)
            worker.start()
        except RuntimeError:
            self._lock.release()
            raise
        return worker

    def _run_and_release(self):
        try:
            self._run_cycle()
        finally:
            self._lock.release()

    def _run_cycle(self):
        try:
            songs = self.store.load()

            new_map = self.client.fetch_random_map()
            if new_map:
                songs.append(new_map)
                logger.info(f"[+] Aggiunta mappa: {new_map['songName']} {new_map['hash']}")
            else:
                logger.info("[X] Nessuna mappa ottenuta da BeatSaver")

            self.store.persist(songs)
            logger.info(
                f"[✓] Playlist aggiornata con {len(songs)} mappe - "
                f"{datetime.now().strftime('%H:%M:%S')}"
            )
        except Exception:
            logger.exception("[!] Errore durante l'aggiornamento della playlist")


def update_playlist_loop(generator, interval=settings.UPDATE_INTERVAL, stop_event=None):
    """Aggiorna subito la playlist, poi ogni `interval` secondi"""
    stop_event = stop_event or threading.Event()
    while not stop_event.is_set():
        generator.update_playlist()
        stop_event.wait(interval)


def start_background_updater(generator, interval=settings.UPDATE_INTERVAL, stop_event=None):
    """Avvia il loop di aggiornamento su un thread daemon"""
    updater = threading.Thread(
        target=update_playlist_loop,
        args=(generator, interval, stop_event),
        name="playlist-updater",
        daemon=True,
    )
    updater.start()
    logger.info(f"Aggiornamento automatico ogni {interval} secondi")
    return updater
