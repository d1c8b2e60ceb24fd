from __future__ import annotations

from dataclasses import asdict
from typing import Callable, Dict, Mapping, Optional

from flask import Flask, jsonify, request

from .config import APP_VERSION, SETTINGS, configure_logging
from .errors import SourceError, YaiptError
from .infrastructure.network import FETCHER, SourceFetcher
from .infrastructure.responses import send_png
from .processing import transforms
from .processing.diff import diff
from .processing.image import Image
from .processing.transforms import BlurMode, ContrastMode, GrayscaleMode

Operation = Callable[[Image, Mapping[str, str]], Image]


def _float(args: Mapping[str, str], name: str, default: Optional[float] = None) -> Optional[float]:
    value = args.get(name)
    return default if value in (None, "") else float(value)


def _gray(image: Image, args: Mapping[str, str]) -> Image:
    mode = GrayscaleMode(args.get("mode", "luminance").lower())
    weights = None
    if args.get("weights"):
        weights = [float(part) for part in args["weights"].split(",")]
    return transforms.be_gray(image, mode, weights)


def _contrast_mode(args: Mapping[str, str]) -> ContrastMode:
    return ContrastMode(args.get("mode", "linear").lower())


def _blur(image: Image, args: Mapping[str, str]) -> Image:
    size = args.get("size")
    return transforms.blur(
        image,
        BlurMode(args.get("mode", "average").lower()),
        size=int(size) if size else None,
        sigma=_float(args, "sigma"),
    )


OPERATIONS: Dict[str, Operation] = {
    "red": lambda image, args: transforms.be_red(image),
    "green": lambda image, args: transforms.be_green(image),
    "blue": lambda image, args: transforms.be_blue(image),
    "gray": _gray,
    "sepia": lambda image, args: transforms.sepia(image),
    "invert": lambda image, args: transforms.invert(image),
    "brightness": lambda image, args: transforms.brightness(image, _float(args, "offset", 0.0)),
    "contrast": lambda image, args: transforms.contrast(
        image, _float(args, "amount", 1.0), _contrast_mode(args)
    ),
    "brightness-contrast": lambda image, args: transforms.brightness_contrast(
        image,
        _float(args, "brightness", 0.0),
        _float(args, "contrast", 1.0),
        _contrast_mode(args),
    ),
    "blur": _blur,
}


def create_app(fetcher: Optional[SourceFetcher] = None) -> Flask:
    logger = configure_logging()
    fetcher = fetcher or FETCHER
    app = Flask(__name__)

    def load(url: Optional[str]) -> Image:
        return Image.from_raw(fetcher.fetch_source(url))

    def failure(exc: Exception):
        if isinstance(exc, SourceError):
            logger.error("Source error: %s", exc)
            return (f"Source Error: {exc}", 502)
        logger.error("Rejected %s: %s", request.full_path, exc)
        return (f"error: {exc}", 400)

    @app.route("/process/<operation>")
    def process(operation: str):
        handler = OPERATIONS.get(operation.lower())
        if handler is None:
            return (f"Unknown operation: {operation}", 404)
        try:
            src = load(request.args.get("source_url"))
            return send_png(handler(src, request.args).export())
        except (YaiptError, ValueError) as exc:
            return failure(exc)

    @app.route("/diff")
    def difference():
        other_url = request.args.get("other_url")
        if not other_url:
            return ("other_url is required", 400)
        try:
            first = load(request.args.get("source_url"))
            second = load(other_url)
            return send_png(diff(first, second).export())
        except (YaiptError, ValueError) as exc:
            return failure(exc)

    @app.route("/raw")
    def raw():
        try:
            return send_png(fetcher.fetch_source(request.args.get("source_url")))
        except SourceError as exc:
            return failure(exc)

    @app.route("/health")
    def health():
        return jsonify(ok=True, version=APP_VERSION, operations=sorted(OPERATIONS))

    @app.route("/settings")
    def settings_view():
        return jsonify(asdict(SETTINGS))

    return app
