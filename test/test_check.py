from base64 import b64encode
from concurrent.futures import ThreadPoolExecutor
from unittest import TestCase

from starsrp import compute_proof
from starsrp.challenge import ChallengeParameters
from starsrp.exception import (
    InvalidChallenge,
    ParameterValidationError,
)
from starsrp.group import DEFAULT_GROUP
from starsrp.payload import PasswordCheckPayload
from starsrp.srp import derive_session_secret
from test import TOY_GROUP, fixed_rng

SRP_ID = 5937489122456870542
SALT = b'\x9d\x1f\x04\x11\x8a\x01\x93\x7c'
PASSWORD = 'pässwörd'
A_ENTROPY = b'\x5a' * 256


def _server_public_value() -> int:
    v = DEFAULT_GROUP.power(2, derive_session_secret(SALT, PASSWORD.encode()))
    return DEFAULT_GROUP.add_mod(v, DEFAULT_GROUP.power(2, 0xdeadbeef))


def _response(**kwargs) -> dict:
    response = {
        'srp_id': SRP_ID,
        'srp_B': format(_server_public_value(), 'x'),
        'current_salt': b64encode(SALT).decode(),
    }
    response.update(kwargs)
    return response


class TestComputeProof(TestCase):
    def test_compute_proof_from_response(self):
        payload = compute_proof(_response(), PASSWORD, fixed_rng(A_ENTROPY))
        self.assertIsInstance(payload, PasswordCheckPayload)
        self.assertEqual(payload.srp_id, SRP_ID)
        self.assertEqual(payload.A, format(pow(2, int.from_bytes(A_ENTROPY, 'big'), DEFAULT_GROUP.modulus), 'x'))
        self.assertRegex(payload.M1, r'^[0-9a-f]{64}$')
        self.assertEqual(payload.to_dict()['_'], 'inputCheckPasswordSRP')

    def test_compute_proof_from_parameters(self):
        params = ChallengeParameters(SRP_ID, _server_public_value(), SALT)
        payload = compute_proof(params, PASSWORD, fixed_rng(A_ENTROPY))
        self.assertEqual(payload, compute_proof(_response(), PASSWORD, fixed_rng(A_ENTROPY)))

    def test_str_password_is_utf8(self):
        self.assertEqual(
            compute_proof(_response(), PASSWORD, fixed_rng(A_ENTROPY)),
            compute_proof(_response(), PASSWORD.encode('utf-8'), fixed_rng(A_ENTROPY)),
        )

    def test_invalid_password_type(self):
        with self.assertRaises(ParameterValidationError):
            compute_proof(_response(), None, fixed_rng(A_ENTROPY))

        with self.assertRaises(ParameterValidationError):
            compute_proof(_response(), 12345, fixed_rng(A_ENTROPY))

    def test_password_not_encodable(self):
        password = 'hunter2\ud800'
        with self.assertRaises(ParameterValidationError) as cm:
            compute_proof(ChallengeParameters(1, 19, b's'), password, fixed_rng(b'\x06'), TOY_GROUP)

        self.assertNotIn('hunter2', str(cm.exception))
        self.assertIsNone(cm.exception.__context__)
        self.assertIsNone(cm.exception.__cause__)

    def test_missing_srp_b(self):
        response = _response()
        del response['srp_B']
        with self.assertRaises(ParameterValidationError):
            compute_proof(response, PASSWORD)

    def test_zero_b(self):
        with self.assertRaises(InvalidChallenge):
            compute_proof(_response(srp_B='0'), PASSWORD)

    def test_b_not_less_than_modulus(self):
        with self.assertRaises(InvalidChallenge):
            compute_proof(_response(srp_B=format(DEFAULT_GROUP.modulus, 'x')), PASSWORD)

    def test_toy_group(self):
        params = ChallengeParameters(1, 19, b's')
        first = compute_proof(params, 'p', fixed_rng(b'\x06'), TOY_GROUP)
        second = compute_proof(params, 'p', fixed_rng(b'\x06'), TOY_GROUP)
        self.assertEqual(first.A, '8')
        self.assertEqual(first.M1, 'd574369f4dea8f9d3f559a9b446710507f2f28a96c41f336597fc783dffcebb2')
        self.assertEqual(first, second)

    def test_fresh_ephemeral_per_attempt(self):
        first = compute_proof(_response(), PASSWORD)
        second = compute_proof(_response(), PASSWORD)
        self.assertNotEqual(first.A, second.A)
        self.assertNotEqual(first.M1, second.M1)

    def test_concurrent_attempts(self):
        with ThreadPoolExecutor(max_workers=8) as executor:
            payloads = list(executor.map(lambda _: compute_proof(_response(), PASSWORD), range(16)))

        self.assertEqual(len({payload.A for payload in payloads}), 16)

    def test_password_is_never_logged(self):
        with self.assertLogs('starsrp', level='DEBUG') as cm:
            compute_proof(_response(), PASSWORD, fixed_rng(A_ENTROPY))
            with self.assertRaises(InvalidChallenge):
                compute_proof(_response(srp_B='0'), PASSWORD)

        output = '\n'.join(cm.output)
        self.assertIn(str(SRP_ID), output)
        self.assertNotIn(PASSWORD, output)
        self.assertNotIn(str(derive_session_secret(SALT, PASSWORD.encode())), output)
