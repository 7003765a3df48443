import logging

from flask import Flask, jsonify, send_file, send_from_directory

import settings
from playlist_generator import PlaylistGenerator, start_background_updater

logger = logging.getLogger(__name__)


def create_app(generator=None, start_updater=True):
    app = Flask(__name__, static_folder=str(settings.PUBLIC_DIR), static_url_path='')
    generator = generator or PlaylistGenerator()
    app.config['PLAYLIST_GENERATOR'] = generator

    @app.route('/')
    def index():
        return send_from_directory(app.static_folder, 'index.html')

    @app.route('/status')
    def status():
        return jsonify(generating=generator.generating)

    @app.route('/generate')
    def generate():
        if generator.start_in_background() is None:
            return 'Generazione già in corso...', 202
        return 'Aggiunta di una nuova mappa casuale...'

    @app.route('/random.bplist')
    def serve_playlist():
        """Endpoint per scaricare la playlist"""
        if generator.generating:
            return 'La playlist è ancora in generazione...', 202
        if not generator.store.playlist_exists():
            return 'Playlist non trovata.', 404
        return send_file(
            generator.store.playlist_path,
            mimetype='application/octet-stream',
            as_attachment=True,
            download_name=settings.PLAYLIST_FILENAME,
            max_age=0,
        )

    if start_updater:
        start_background_updater(generator)  # Avvia subito la generazione e l'updater

    return app


if __name__ == '__main__':
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )
    app = create_app()
    logger.info(f"🎧 Server playlist attivo sulla porta {settings.PORT}")
    app.run(host=settings.HOST, port=settings.PORT, threaded=True)
