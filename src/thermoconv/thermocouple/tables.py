"""NIST ITS-90 / IEC 60584 reference functions for letter-designated thermocouples.

Forward segments map temperature (°C) to EMF (mV) with the reference junction at
0 °C. Inverse segments are the separately published mV -> °C approximations and
only span the sub-range the standard fits them over, so they do not cover the
lowest part of the K, J, T, E and N domains nor the bottom of type B.

Published inverse-fit error bounds (°C):

    K  -0.02..0.04 / -0.05..0.04 / -0.05..0.06
    J  -0.05..0.03 / -0.04..0.04 / -0.04..0.03
    T  -0.02..0.04 / -0.03..0.03
    E  -0.01..0.03 / -0.02..0.02
    N  -0.02..0.03 / -0.02..0.03 / -0.04..0.02
    R  -0.02..0.02 / -0.005..0.005 / -0.0005..0.001 / -0.001..0.002
    S  -0.02..0.02 / -0.01..0.01 / -0.0002..0.0002 / -0.002..0.002
    B  -0.02..0.03 / -0.01..0.02
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from thermoconv.domain.errors import UnknownSensorTypeError
from thermoconv.domain.models import RangeLimits, SensorType
from thermoconv.numerics.polynomials import ExponentialTerm, PiecewisePolynomial, SensorCurve


def _segment(
    domain_min: float,
    domain_max: float,
    coefficients: tuple[float, ...],
    exponential: ExponentialTerm | None = None,
) -> PiecewisePolynomial:
    return PiecewisePolynomial(domain_min, domain_max, coefficients, exponential)


TYPE_K = SensorCurve(
    forward_segments=(
        _segment(-270.0, 0.0, (
            0.0,
            0.394501280250e-1,
            0.236223735980e-4,
            -0.328589067840e-6,
            -0.499048287770e-8,
            -0.675090591730e-10,
            -0.574103274280e-12,
            -0.310888728940e-14,
            -0.104516093650e-16,
            -0.198892668780e-19,
            -0.163226974860e-22,
        )),
        _segment(
            0.0,
            1372.0,
            (
                -0.176004136860e-1,
                0.389212049750e-1,
                0.185587700320e-4,
                -0.994575928740e-7,
                0.318409457190e-9,
                -0.560728448890e-12,
                0.560750590590e-15,
                -0.320207200030e-18,
                0.971511471520e-22,
                -0.121047212750e-25,
            ),
            ExponentialTerm(a0=0.118597600000e0, a1=-0.118343200000e-3, a2=0.126968600000e3),
        ),
    ),
    inverse_segments=(
        _segment(-5.891, 0.0, (
            0.0,
            2.5173462e1,
            -1.1662878e0,
            -1.0833638e0,
            -8.9773540e-1,
            -3.7342377e-1,
            -8.6632643e-2,
            -1.0450598e-2,
            -5.1920577e-4,
        )),
        _segment(0.0, 20.644, (
            0.0,
            2.508355e1,
            7.860106e-2,
            -2.503131e-1,
            8.315270e-2,
            -1.228034e-2,
            9.804036e-4,
            -4.413030e-5,
            1.057734e-6,
            -1.052755e-8,
        )),
        _segment(20.644, 54.886, (
            -1.318058e2,
            4.830222e1,
            -1.646031e0,
            5.464731e-2,
            -9.650715e-4,
            8.802193e-6,
            -3.110810e-8,
        )),
    ),
)

TYPE_J = SensorCurve(
    forward_segments=(
        _segment(-210.0, 760.0, (
            0.0,
            0.503811878150e-1,
            0.304758369300e-4,
            -0.856810657200e-7,
            0.132281952950e-9,
            -0.170529583370e-12,
            0.209480906970e-15,
            -0.125383953360e-18,
            0.156317256970e-22,
        )),
        _segment(760.0, 1200.0, (
            0.296456256810e3,
            -0.149761277860e1,
            0.317871039240e-2,
            -0.318476867010e-5,
            0.157208190040e-8,
            -0.306913690560e-12,
        )),
    ),
    inverse_segments=(
        _segment(-8.095, 0.0, (
            0.0,
            1.9528268e1,
            -1.2286185e0,
            -1.0752178e0,
            -5.9086933e-1,
            -1.7256713e-1,
            -2.8131513e-2,
            -2.3963370e-3,
            -8.3823321e-5,
        )),
        _segment(0.0, 42.919, (
            0.0,
            1.978425e1,
            -2.001204e-1,
            1.036969e-2,
            -2.549687e-4,
            3.585153e-6,
            -5.344285e-8,
            5.099890e-10,
        )),
        _segment(42.919, 69.553, (
            -3.11358187e3,
            3.00543684e2,
            -9.94773230e0,
            1.70276630e-1,
            -1.43033468e-3,
            4.73886084e-6,
        )),
    ),
)

TYPE_T = SensorCurve(
    forward_segments=(
        _segment(-270.0, 0.0, (
            0.0,
            0.387481063640e-1,
            0.441944343470e-4,
            0.118443231050e-6,
            0.200329735540e-7,
            0.901380195590e-9,
            0.226511565930e-10,
            0.360711542050e-12,
            0.384939398830e-14,
            0.282135219250e-16,
            0.142515947790e-18,
            0.487686622860e-21,
            0.107955392700e-23,
            0.139450270620e-26,
            0.797951539270e-30,
        )),
        _segment(0.0, 400.0, (
            0.0,
            0.387481063640e-1,
            0.332922278800e-4,
            0.206182434040e-6,
            -0.218822568460e-8,
            0.109968809280e-10,
            -0.308157587720e-13,
            0.454791352900e-16,
            -0.275129016730e-19,
        )),
    ),
    inverse_segments=(
        _segment(-5.603, 0.0, (
            0.0,
            2.5949192e1,
            -2.1316967e-1,
            7.9018692e-1,
            4.2527777e-1,
            1.3304473e-1,
            2.0241446e-2,
            1.2668171e-3,
        )),
        _segment(0.0, 20.872, (
            0.0,
            2.592800e1,
            -7.602961e-1,
            4.637791e-2,
            -2.165394e-3,
            6.048144e-5,
            -7.293422e-7,
        )),
    ),
)

TYPE_E = SensorCurve(
    forward_segments=(
        _segment(-270.0, 0.0, (
            0.0,
            0.586655087080e-1,
            0.454109771240e-4,
            -0.779980486860e-6,
            -0.258001608430e-7,
            -0.594525830570e-9,
            -0.932140586670e-11,
            -0.102876055340e-12,
            -0.803701236210e-15,
            -0.439794973910e-17,
            -0.164147763550e-19,
            -0.396736195160e-22,
            -0.558273287210e-25,
            -0.346578420130e-28,
        )),
        _segment(0.0, 1000.0, (
            0.0,
            0.586655087100e-1,
            0.450322755820e-4,
            0.289084072120e-7,
            -0.330568966520e-9,
            0.650244032700e-12,
            -0.191974955040e-15,
            -0.125366004970e-17,
            0.214892175690e-20,
            -0.143880417820e-23,
            0.359608994810e-27,
        )),
    ),
    inverse_segments=(
        _segment(-8.825, 0.0, (
            0.0,
            1.6977288e1,
            -4.3514970e-1,
            -1.5859697e-1,
            -9.2502871e-2,
            -2.6084314e-2,
            -4.1360199e-3,
            -3.4034030e-4,
            -1.1564890e-5,
        )),
        _segment(0.0, 76.373, (
            0.0,
            1.7057035e1,
            -2.3301759e-1,
            6.5435585e-3,
            -7.3562749e-5,
            -1.7896001e-6,
            8.4036165e-8,
            -1.3735879e-9,
            1.0629823e-11,
            -3.2447087e-14,
        )),
    ),
)

TYPE_N = SensorCurve(
    forward_segments=(
        _segment(-270.0, 0.0, (
            0.0,
            0.261591059620e-1,
            0.109574842280e-4,
            -0.938411115540e-7,
            -0.464120397590e-10,
            -0.263033577160e-11,
            -0.226534380030e-13,
            -0.760893007910e-16,
            -0.934196678350e-19,
        )),
        _segment(0.0, 1300.0, (
            0.0,
            0.259293946010e-1,
            0.157101418800e-4,
            0.438256272370e-7,
            -0.252611697940e-9,
            0.643118193390e-12,
            -0.100634715190e-14,
            0.997453389920e-18,
            -0.608632456070e-21,
            0.208492293390e-24,
            -0.306821961510e-28,
        )),
    ),
    inverse_segments=(
        _segment(-3.990, 0.0, (
            0.0,
            3.8436847e1,
            1.1010485e0,
            5.2229312e0,
            7.2060525e0,
            5.8488586e0,
            2.7754916e0,
            7.7075166e-1,
            1.1582665e-1,
            7.3138868e-3,
        )),
        _segment(0.0, 20.613, (
            0.0,
            3.86896e1,
            -1.08267e0,
            4.70205e-2,
            -2.12169e-6,
            -1.17272e-4,
            5.39280e-6,
            -7.98156e-8,
        )),
        _segment(20.613, 47.513, (
            1.972485e1,
            3.300943e1,
            -3.915159e-1,
            9.855391e-3,
            -1.274371e-4,
            7.767022e-7,
        )),
    ),
)

TYPE_R = SensorCurve(
    forward_segments=(
        _segment(-50.0, 1064.18, (
            0.0,
            0.528961729765e-2,
            0.139166589782e-4,
            -0.238855693017e-7,
            0.356916001063e-10,
            -0.462347666298e-13,
            0.500777441034e-16,
            -0.373105886191e-19,
            0.157716482367e-22,
            -0.281038625251e-26,
        )),
        _segment(1064.18, 1664.5, (
            0.295157925316e1,
            -0.252061251332e-2,
            0.159564501865e-4,
            -0.764085947576e-8,
            0.205305291024e-11,
            -0.293359668173e-15,
        )),
        _segment(1664.5, 1768.1, (
            0.152232118209e3,
            -0.268819888545e0,
            0.171280280471e-3,
            -0.345895706453e-7,
            -0.934633971046e-14,
        )),
    ),
    inverse_segments=(
        _segment(-0.226, 1.923, (
            0.0,
            1.8891380e2,
            -9.3835290e1,
            1.3068619e2,
            -2.2703580e2,
            3.5145659e2,
            -3.8953900e2,
            2.8239471e2,
            -1.2607281e2,
            3.1353611e1,
            -3.3187769e0,
        )),
        _segment(1.923, 13.228, (
            1.334584505e1,
            1.472644573e2,
            -1.844024844e1,
            4.031129726e0,
            -6.249428360e-1,
            6.468412046e-2,
            -4.458750426e-3,
            1.994710149e-4,
            -5.313401790e-6,
            6.481976217e-8,
        )),
        _segment(13.228, 19.739, (
            -8.199599416e1,
            1.553962042e2,
            -8.342197663e0,
            4.279433549e-1,
            -1.191577910e-2,
            1.492290091e-4,
        )),
        _segment(19.739, 21.103, (
            3.406177836e4,
            -7.023729171e3,
            5.582903813e2,
            -1.952394635e1,
            2.560740231e-1,
        )),
    ),
)

TYPE_S = SensorCurve(
    forward_segments=(
        _segment(-50.0, 1064.18, (
            0.0,
            0.540313308631e-2,
            0.125934289740e-4,
            -0.232477968689e-7,
            0.322028823036e-10,
            -0.331465196389e-13,
            0.255744251786e-16,
            -0.125068871393e-19,
            0.271443176145e-23,
        )),
        _segment(1064.18, 1664.5, (
            0.132900444085e1,
            0.334509311344e-2,
            0.654805192818e-5,
            -0.164856259209e-8,
            0.129989605174e-13,
        )),
        _segment(1664.5, 1768.1, (
            0.146628232636e3,
            -0.258430516752e0,
            0.163693574641e-3,
            -0.330439046987e-7,
            -0.943223690612e-14,
        )),
    ),
    inverse_segments=(
        _segment(-0.235, 1.874, (
            0.0,
            1.84949460e2,
            -8.00504062e1,
            1.02237430e2,
            -1.52248592e2,
            1.88821343e2,
            -1.59085941e2,
            8.23027880e1,
            -2.34181944e1,
            2.79786260e0,
        )),
        _segment(1.874, 11.950, (
            1.291507177e1,
            1.466298863e2,
            -1.534713402e1,
            3.145945973e0,
            -4.163257839e-1,
            3.187963771e-2,
            -1.291637500e-3,
            2.183475087e-5,
            -1.447379511e-7,
            8.211272125e-9,
        )),
        _segment(11.950, 17.536, (
            -8.087801117e1,
            1.621573104e2,
            -8.536869453e0,
            4.719686976e-1,
            -1.441693666e-2,
            2.081618890e-4,
        )),
        _segment(17.536, 18.693, (
            5.333875126e4,
            -1.235892298e4,
            1.092657613e3,
            -4.265693686e1,
            6.247205420e-1,
        )),
    ),
)

TYPE_B = SensorCurve(
    forward_segments=(
        _segment(0.0, 630.615, (
            0.0,
            -0.246508183460e-3,
            0.590404211710e-5,
            -0.132579316360e-8,
            0.156682919010e-11,
            -0.169445292400e-14,
            0.629903470940e-18,
        )),
        _segment(630.615, 1820.0, (
            -0.389381686210e1,
            0.285717474700e-1,
            -0.848851047850e-4,
            0.157852801640e-6,
            -0.168353448640e-9,
            0.111097940130e-12,
            -0.445154310330e-16,
            0.989756408210e-20,
            -0.937913302890e-24,
        )),
    ),
    inverse_segments=(
        _segment(0.291, 2.431, (
            9.8423321e1,
            6.9971500e2,
            -8.4765304e2,
            1.0052644e3,
            -8.3345952e2,
            4.5508542e2,
            -1.5523037e2,
            2.9886750e1,
            -2.4742860e0,
        )),
        _segment(2.431, 13.820, (
            2.1315071e2,
            2.8510504e2,
            -5.2742887e1,
            9.9160804e0,
            -1.2965303e0,
            1.1195870e-1,
            -6.0625199e-3,
            1.8661696e-4,
            -2.4878585e-6,
        )),
    ),
)

THERMOCOUPLE_CURVES: Mapping[SensorType, SensorCurve] = MappingProxyType(
    {
        SensorType.K: TYPE_K,
        SensorType.J: TYPE_J,
        SensorType.T: TYPE_T,
        SensorType.E: TYPE_E,
        SensorType.N: TYPE_N,
        SensorType.R: TYPE_R,
        SensorType.S: TYPE_S,
        SensorType.B: TYPE_B,
    }
)

# Temperature span (°C) each inverse table was fitted over.
INVERSE_FIT_LIMITS: Mapping[SensorType, RangeLimits] = MappingProxyType(
    {
        SensorType.K: RangeLimits(-200.0, 1372.0),
        SensorType.J: RangeLimits(-210.0, 1200.0),
        SensorType.T: RangeLimits(-200.0, 400.0),
        SensorType.E: RangeLimits(-200.0, 1000.0),
        SensorType.N: RangeLimits(-200.0, 1300.0),
        SensorType.R: RangeLimits(-50.0, 1768.0),
        SensorType.S: RangeLimits(-50.0, 1768.0),
        SensorType.B: RangeLimits(250.0, 1820.0),
    }
)

# Inverse table limits are published to 1 µV, so the forward EMF at a fit
# endpoint can land a fraction of a µV past them.
INVERSE_END_TOLERANCE_MV = 1e-3


def curve_for(sensor_type: SensorType) -> SensorCurve:
    """Reference curve for a thermocouple; other families are rejected."""
    curve = THERMOCOUPLE_CURVES.get(sensor_type)
    if curve is None:
        raise UnknownSensorTypeError(str(sensor_type), "not a thermocouple")
    return curve
