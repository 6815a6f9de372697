"""
Flask web GUI for the False Position quadratic solver.

Users can:
    - Enter the coefficients a, b, c, a bracket [xL, xU] and a tolerance.
    - Post them to /solve and get back JSON with the root, the iteration
      table, the discriminant summary and points for plotting f(x).
"""

from __future__ import annotations

import logging
import math
import re
from typing import Optional

from flask import Flask, jsonify, render_template, request
from flask_cors import CORS
from jinja2 import TemplateNotFound

from fp_config import ServerConfig
from fp_solver import build_response

logger = logging.getLogger(__name__)

app = Flask(__name__)
app.json.sort_keys = False
CORS(app, send_wildcard=True)

FIELDS = ("a", "b", "c", "xl", "xu", "tol")

_NUMERIC_PREFIX = re.compile(r"\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


def _float_from_form(name: str, form) -> float:
    """
    Read a numeric field the lenient way: use the leading number if there is
    one, otherwise 0.0. Missing and non-finite values are also 0.0.
    """
    raw: Optional[str] = form.get(name)
    if raw is None:
        return 0.0
    match = _NUMERIC_PREFIX.match(raw)
    if not match:
        return 0.0
    value = float(match.group(0))
    if not math.isfinite(value):
        return 0.0
    return value


@app.route("/", methods=["GET"])
def index():
    try:
        return render_template("index.html")
    except TemplateNotFound:
        logger.error("Cannot find index.html in %s", app.template_folder)
        return "Not Found", 404


@app.route("/solve", methods=["POST"])
def solve_endpoint():
    params = {name: _float_from_form(name, request.form) for name in FIELDS}
    payload = build_response(**params)
    if payload["success"]:
        logger.info(
            "Solved a=%g b=%g c=%g on [%g, %g]: root=%s after %d iterations",
            params["a"],
            params["b"],
            params["c"],
            params["xl"],
            params["xu"],
            payload["root"],
            payload["iterations"],
        )
    else:
        logger.info("Solve rejected: %s", payload["error"])
    return jsonify(payload)


def main() -> None:
    config = ServerConfig()
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("False Position server listening on http://%s:%d", config.host, config.port)
    app.run(host=config.host, port=config.port, debug=config.debug)


if __name__ == "__main__":
    main()
