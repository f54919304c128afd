from pathlib import Path

import pytest
from py_ecc.bn128 import G1, G2, multiply

from huffv.types.verification_key import VerificationKey

DATA_DIR = Path(__file__).parent / "data"


def pytest_addoption(parser):
    parser.addoption(
        "--save-verifier",
        action="store",
        nargs="?",
        const="verifiers",
        help="Save the generated verifier contracts to the specified directory",
    )


@pytest.fixture
def save_verifier_folder(request):
    return request.config.getoption("--save-verifier")


def g1_point(scalar: int) -> list[str]:
    """Return scalar * G1 in snarkjs format."""
    point = multiply(G1, scalar)
    return [str(int(point[0])), str(int(point[1])), "1"]


def g2_point(scalar: int) -> list[list[str]]:
    """Return scalar * G2 in snarkjs format: rows x, y, z, each as [real, imaginary]."""
    point = multiply(G2, scalar)
    return [[str(int(c)) for c in point[0].coeffs], [str(int(c)) for c in point[1].coeffs], ["1", "0"]]


def verification_key_json(n_public: int) -> dict:
    # Scalars are arbitrary, the keys are not the output of a trusted setup
    return {
        "protocol": "groth16",
        "curve": "bn128",
        "nPublic": n_public,
        "vk_alpha_1": g1_point(11),
        "vk_beta_2": g2_point(13),
        "vk_gamma_2": g2_point(17),
        "vk_delta_2": g2_point(19),
        "vk_alphabeta_12": [[["0", "0"], ["0", "0"], ["0", "0"]], [["0", "0"], ["0", "0"], ["0", "0"]]],
        "IC": [g1_point(23 + i) for i in range(n_public + 1)],
    }


@pytest.fixture
def vk_json_factory():
    return verification_key_json


@pytest.fixture
def vk_factory():
    def make(n_public: int) -> VerificationKey:
        return VerificationKey.from_json_dict(verification_key_json(n_public))

    return make


@pytest.fixture
def sample_vk_path():
    return DATA_DIR / "verification_key.json"
