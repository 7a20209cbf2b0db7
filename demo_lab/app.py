# app.py  (LAB TARGET: something harmless to point the scanner at)
#   python demo_lab/app.py                 -> listens on 127.0.0.1:5055
#   LAB_PORT=8000 python demo_lab/app.py   -> pick another port
#   portscan -host 127.0.0.1 -p 5050-5060  -> should report 5055 open
import os

from flask import Flask, jsonify

LAB_HOST = "127.0.0.1"
LAB_PORT = int(os.environ.get("LAB_PORT", "5055"))

app = Flask(__name__)


@app.get("/")
def home():
    return f"""<!doctype html><html><body>
    <h1>Port scan lab target</h1>
    <p>This port is open. Try: <code>portscan -host {LAB_HOST} -p {LAB_PORT - 5}-{LAB_PORT + 5}</code></p>
    </body></html>"""


@app.get("/health")
def health():
    return jsonify(status="ok", port=LAB_PORT)


if __name__ == "__main__":
    print("ROUTES:", app.url_map)
    app.run(host=LAB_HOST, port=LAB_PORT, debug=False)
