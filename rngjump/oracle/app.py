# rngjump/oracle/app.py
# Flask oracle exposing /get_output, /jumpahead, /state and /validate
# Supports SEED_MODE = 'fixed' | 'random' | 'time'

import logging
import os
import time

from flask import Flask, jsonify, request

from rngjump import GENERATORS
from rngjump.rngcore import MASK32

from . import config

# Setup logging
logging.basicConfig(level=getattr(logging, config.LOG_LEVEL.upper(), logging.INFO))
logger = logging.getLogger('rngjump.oracle')

DEFAULT_SEEDS = (2247183469, 99545079, 3269400377, 3950144837)


def derive_seeds(count):
    """
    Derive `count` 32-bit seeds according to config.SEED_MODE.
    Priority:
      - If SEED_MODE == 'fixed' and config.SEEDS is set -> use it (padded with 0)
      - If SEED_MODE == 'fixed' and config.SEEDS is None -> use deterministic defaults
      - If SEED_MODE == 'random' -> use os.urandom(4) per seed
      - If SEED_MODE == 'time' -> use current time (seconds or ms) mixed into each default
    """
    mode = (config.SEED_MODE or 'fixed').lower()
    if mode == 'fixed':
        if config.SEEDS is not None:
            seeds = [int(s) & MASK32 for s in config.SEEDS][:count]
            seeds += [0] * (count - len(seeds))
            logger.info(f"Using fixed SEEDS from config: {seeds}")
            return seeds
        seeds = list(DEFAULT_SEEDS[:count]) + [0] * max(0, count - len(DEFAULT_SEEDS))
        logger.info(f"Using default fixed SEEDS: {seeds}")
        return seeds
    elif mode == 'random':
        seeds = [int.from_bytes(os.urandom(4), 'big') for _ in range(count)]
        logger.info(f"Using random SEEDS (os.urandom): {seeds}")
        return seeds
    elif mode == 'time':
        if config.TIME_GRANULARITY == 'ms':
            t = int(time.time() * 1000)
        else:
            t = int(time.time())
        # low entropy on purpose, demo only
        defaults = list(DEFAULT_SEEDS) * (count // len(DEFAULT_SEEDS) + 1)
        seeds = [(t ^ d) & MASK32 for d in defaults[:count]]
        logger.info(f"Using time-derived SEEDS (granu={config.TIME_GRANULARITY}): {seeds}")
        return seeds
    # fallback to deterministic
    seeds = list(DEFAULT_SEEDS[:count]) + [0] * max(0, count - len(DEFAULT_SEEDS))
    logger.warning(f"Unknown SEED_MODE '{config.SEED_MODE}', falling back to default SEEDS: {seeds}")
    return seeds


def build_rng(name=None):
    name = (name or config.GENERATOR).lower()
    try:
        cls = GENERATORS[name]
    except KeyError:
        raise ValueError(f"unknown generator '{name}', expected one of {sorted(GENERATORS)}") from None
    return cls(*derive_seeds(cls.SEED_COUNT))


def parse_jump(value):
    # JSON ints, or decimal strings for distances beyond what clients can encode
    if isinstance(value, bool):
        raise ValueError('n must be an integer')
    if isinstance(value, int):
        n = value
    elif isinstance(value, str):
        n = int(value.strip(), 10)
    else:
        raise ValueError('n must be an integer')
    if n.bit_length() > config.JUMP_BITS_MAX:
        raise ValueError(f'n exceeds {config.JUMP_BITS_MAX} bits')
    return n


def create_app(rng=None):
    app = Flask(__name__)
    if rng is None:
        rng = build_rng()
    app.config['RNG'] = rng
    logger.info(f"Oracle serving {type(rng).__name__} with state {rng.state}")

    def current_rng():
        return app.config['RNG']

    @app.route('/get_output', methods=['GET'])
    def get_output():
        out = current_rng().next_u32()
        return jsonify({'output': format(out, '08x')})

    @app.route('/jumpahead', methods=['POST'])
    def jumpahead():
        data = request.get_json(silent=True)
        if not data or 'n' not in data:
            return jsonify({'ok': False, 'reason': 'need n'}), 400
        try:
            n = parse_jump(data['n'])
        except ValueError as exc:
            return jsonify({'ok': False, 'reason': str(exc)}), 400
        t0 = time.time()
        current_rng().jumpahead(n)
        logger.info(f"Jumped ahead by {n} in {time.time() - t0:.4f}s")
        return jsonify({'ok': True, 'n': str(n)})

    @app.route('/state', methods=['GET'])
    def state():
        rng = current_rng()
        name = next((k for k, v in GENERATORS.items() if v is type(rng)), type(rng).__name__.lower())
        return jsonify({'generator': name, 'state': [format(w, 'x') for w in rng.state]})

    @app.route('/validate', methods=['POST'])
    def validate():
        data = request.get_json(silent=True)
        if not data or 'candidate' not in data:
            return jsonify({'ok': False, 'reason': 'need candidate'}), 400
        try:
            candidate = int(data['candidate'], 16)
        except (TypeError, ValueError):
            return jsonify({'ok': False, 'reason': 'bad hex'}), 400
        expected = current_rng().next_u32()
        ok = (candidate & MASK32) == expected
        return jsonify({'ok': ok, 'expected': format(expected, '08x')})

    return app


app = create_app()

if __name__ == '__main__':
    logger.info(f"Starting oracle at http://{config.HOST}:{config.PORT} with SEED_MODE={config.SEED_MODE}")
    app.run(host=config.HOST, port=config.PORT, debug=False)
