import json
import logging
import os
from pathlib import Path

import settings

logger = logging.getLogger(__name__)


class SongStore:
    """
    Stato su disco della playlist.

    Due file: la lista delle canzoni (random.tmp.json), usata per ripartire
    dopo un riavvio, e il documento .bplist servito ai client, derivato dalla
    stessa lista. Entrambi vengono riscritti per intero a ogni salvataggio.
    """

    def __init__(self, songs_path=settings.SONGS_PATH,
                 playlist_path=settings.PLAYLIST_PATH,
                 title=settings.PLAYLIST_TITLE,
                 author=settings.PLAYLIST_AUTHOR,
                 image=settings.PLAYLIST_IMAGE,
                 sync_url=settings.PLAYLIST_SYNC_URL):
        self.songs_path = Path(songs_path)
        self.playlist_path = Path(playlist_path)
        self.title = title
        self.author = author
        self.image = image
        self.sync_url = sync_url

    def load(self):
        """Carica le canzoni salvate; lista vuota se il file manca o è corrotto"""
        if not self.songs_path.exists():
            logger.debug(f"Nessuno stato in {self.songs_path}, si parte da zero")
            return []

        try:
            with open(self.songs_path, 'r', encoding='utf-8') as f:
                songs = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning(f"[!] Stato illeggibile in {self.songs_path}, riparto vuoto: {e}")
            return []

        if not isinstance(songs, list):
            logger.warning(f"[!] Stato in {self.songs_path} non è una lista, riparto vuoto")
            return []
        return songs

    def build_playlist(self, songs):
        return {
            'playlistTitle': self.title,
            'playlistAuthor': self.author,
            'customData': {
                'image': self.image,
                'syncURL': self.sync_url,
            },
            'songs': songs,
        }

    def persist(self, songs):
        """Riscrive lista e playlist; gli errori di I/O risalgono al chiamante"""
        self._write_json(self.songs_path, songs)
        self._write_json(self.playlist_path, self.build_playlist(songs))

    def playlist_exists(self):
        return self.playlist_path.is_file()

    @staticmethod
    def _write_json(path, data):
        # scrittura su file temporaneo + rename: chi legge vede sempre un file completo
        tmp_path = path.with_name(path.name + '.tmp')
        try:
            with open(tmp_path, 'w', encoding='utf-8') as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
            os.replace(tmp_path, path)
        except OSError:
            if tmp_path.exists():
                try:
                    tmp_path.unlink()
                except OSError as cleanup_error:
                    logger.debug(f"Impossibile rimuovere {tmp_path}: {cleanup_error}")
            raise
