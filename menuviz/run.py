import os

from menuviz import create_app
from menuviz.config.settings import config

# Create the Flask application
app = create_app(config[os.getenv("APP_ENV", "default")])

if __name__ == "__main__":
    port = int(os.getenv("PORT", "5000"))
    app.run(host="0.0.0.0", port=port, debug=False, use_reloader=False, threaded=True)
