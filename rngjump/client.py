# rngjump/client.py
# Client for the oracle: read the generator state, rebuild the generator
# locally, jump both copies ahead by n, predict the next output and check it
# via /validate.

import argparse
import logging
import time

import requests

from rngjump import GENERATORS

ORACLE = 'http://127.0.0.1:5000'
TIMEOUT = 5

logger = logging.getLogger('rngjump.client')


def query_state(oracle=ORACLE):
    r = requests.get(oracle + '/state', timeout=TIMEOUT)
    r.raise_for_status()
    data = r.json()
    return data['generator'], tuple(int(w, 16) for w in data['state'])


def query_outputs(n, oracle=ORACLE):
    outs = []
    for _ in range(n):
        r = requests.get(oracle + '/get_output', timeout=TIMEOUT)
        r.raise_for_status()
        outs.append(int(r.json()['output'], 16))
    return outs


def request_jump(n, oracle=ORACLE):
    # sent as a decimal string so any distance survives JSON
    r = requests.post(oracle + '/jumpahead', json={'n': str(n)}, timeout=TIMEOUT)
    r.raise_for_status()
    return r.json()


def validate(candidate, oracle=ORACLE):
    r = requests.post(oracle + '/validate', json={'candidate': format(candidate, '08x')}, timeout=TIMEOUT)
    r.raise_for_status()
    return r.json()


def rebuild(name, state):
    try:
        cls = GENERATORS[name]
    except KeyError:
        raise ValueError(f"oracle serves unknown generator '{name}'") from None
    return cls.from_state(state)


def predict_after_jump(n, oracle=ORACLE):
    """Jump the oracle and a local copy by n; return (prediction, validate reply)."""
    name, state = query_state(oracle)
    local = rebuild(name, state)
    logger.info(f"rebuilt {name} from state {state}")
    local.jumpahead(n)
    request_jump(n, oracle)
    predicted = local.next_u32()
    return predicted, validate(predicted, oracle)


def main(argv=None):
    parser = argparse.ArgumentParser(description='Jump the oracle ahead and predict its next output')
    parser.add_argument('--oracle', default=ORACLE, help='oracle base URL')
    parser.add_argument('--samples', type=int, default=2, help='outputs to print before jumping')
    parser.add_argument('--jump', type=int, default=10**18, help='jump distance (may be negative)')
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)
    t0 = time.time()
    print(f"[client] Querying oracle for {args.samples} outputs...")
    for i, o in enumerate(query_outputs(args.samples, args.oracle)):
        print(f" obs[{i}]: {o:08x}")
    predicted, resp = predict_after_jump(args.jump, args.oracle)
    print(f"[client] Predicted output after jumping {args.jump}: {predicted:08x}")
    print("[client] Validate response:", resp)
    print(f"[client] Done in {time.time() - t0:.2f}s")
    return 0 if resp.get('ok') else 1


if __name__ == '__main__':
    raise SystemExit(main())
