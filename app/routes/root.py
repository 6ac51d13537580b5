from flask import jsonify, render_template


def register_root_routes(app):
    """Register the upload page and the liveness probe."""

    @app.route('/')
    def index():
        return render_template('index.html')

    @app.route('/health')
    def health():
        return jsonify({"status": "healthy"})
