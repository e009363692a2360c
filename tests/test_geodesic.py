import logging
import math

import pytest
from pytest import approx

from geolines import Caps, Ellipsoid, Geodesic, GeodesicLine

from tests.functions import assert_all_nan, assert_result_fields

# (lat1, lon1, azi1, lat2, lon2, azi2, s12, a12, m12, M12, M21, S12) on WGS84
TESTCASES = [
    (35.60777, -139.44815, 111.098748429560326, -11.17491, -69.95921, 129.289270889708762, 8935244.5604818305, 80.50729714281974, 6273170.2055303837, 0.16606318447386067, 0.16479116945612937, 12841384694976.432),
    (55.52454, 106.05087, 22.020059880982801, 77.03196, 197.18234, 109.112041110671519, 4105086.1713924406, 36.892740690445894, 3828869.3344387607, 0.80076349608092607, 0.80101006984201008, 61674961290615.615),
    (-21.97856, 142.59065, -32.44456876433189, 41.84138, 98.56635, -41.84359951440466, 8394328.894657671, 75.62930491011522, 6161154.5773110616, 0.24816339233950381, 0.24930251203627892, -6637997720646.717),
    (-66.99028, 112.2363, 173.73491240878403, -12.70631, 285.90344, 2.512956620913668, 11150344.2312080241, 100.278634181155759, 6289939.5670446687, -0.17199490274700385, -0.17722569526345708, -121287239862139.744),
    (-17.42761, 173.34268, -159.033557661192928, -15.84784, 5.93557, -20.787484651536988, 16076603.1631180673, 144.640108810286253, 3732902.1583877189, -0.81273638700070476, -0.81299800519154474, 97825992354058.708),
    (32.84994, 48.28919, 150.492927788121982, -56.28556, 202.29132, 48.113449399816759, 16727068.9438164461, 150.565799985466607, 3147838.1910180939, -0.87334918086923126, -0.86505036767110637, -72445258525585.010),
    (6.96833, 52.74123, 92.581585386317712, -7.39675, 206.17291, 90.721692165923907, 17102477.2496958388, 154.147366239113561, 2772035.6169917581, -0.89991282520302447, -0.89986892177110739, -1311796973197.995),
    (-50.56724, -16.30485, -105.439679907590164, -33.56571, -94.97412, -47.348547835650331, 6455670.5118668696, 58.083719495371259, 5409150.7979815838, 0.53053508035997263, 0.52988722644436602, 41071447902810.047),
    (-58.93002, -8.90775, 140.965397902500679, -8.91104, 133.13503, 19.255429433416599, 11756066.0219864627, 105.755691241406877, 6151101.2270708536, -0.26548622269867183, -0.27068483874510741, -86143460552774.735),
    (-68.82867, -74.28391, 93.774347763114881, -50.63005, -8.36685, 34.65564085411343, 3956936.926063544, 35.572254987389284, 3708890.9544062657, 0.81443963736383502, 0.81420859815358342, -41845309450093.787),
    (-10.62672, -32.0898, -86.426713286747751, 5.883, -134.31681, -80.473780971034875, 11470869.3864563009, 103.387395634504061, 6184411.6622659713, -0.23138683500430237, -0.23155097622286792, 4198803992123.548),
    (-21.76221, 166.90563, 29.319421206936428, 48.72884, 213.97627, 43.508671946410168, 9098627.3986554915, 81.963476716121964, 6299240.9166992283, 0.13965943368590333, 0.14152969707656796, 10024709850277.476),
    (-19.79938, -174.47484, 71.167275780171533, -11.99349, -154.35109, 65.589099775199228, 2319004.8601169389, 20.896611684802389, 2267960.8703918325, 0.93427001867125849, 0.93424887135032789, -3935477535005.785),
    (-11.95887, -116.94513, 92.712619830452549, 4.57352, 7.16501, 78.64960934409585, 13834722.5801401374, 124.688684161089762, 5228093.177931598, -0.56879356755666463, -0.56918731952397221, -9919582785894.853),
    (-87.85331, 85.66836, -65.120313040242748, 66.48646, 16.09921, -4.888658719272296, 17286615.3147144645, 155.58592449699137, 2635887.4729110181, -0.90697975771398578, -0.91095608883042767, 42667211366919.534),
    (1.74708, 128.32011, -101.584843631173858, -11.16617, 11.87109, -86.325793296437476, 12942901.1241347408, 116.650512484301857, 5682744.8413270572, -0.44857868222697644, -0.44824490340007729, 10763055294345.653),
    (-25.72959, -144.90758, -153.647468693117198, -57.70581, -269.17879, -48.343983158876487, 9413446.7452453107, 84.664533838404295, 6356176.6898881281, 0.09492245755254703, 0.09737058264766572, 74515122850712.444),
    (-41.22777, 122.32875, 14.285113402275739, -7.57291, 130.37946, 10.805303085187369, 3812686.035106021, 34.34330804743883, 3588703.8812128856, 0.82605222593217889, 0.82572158200920196, -2456961531057.857),
    (11.01307, 138.25278, 79.43682622782374, 6.62726, 247.05981, 103.708090215522657, 11911190.819018408, 107.341669954114577, 6070904.722786735, -0.29767608923657404, -0.29785143390252321, 17121631423099.696),
    (-29.47124, 95.14681, -163.779130441688382, -27.46601, -69.15955, -15.909335945554969, 13487015.8381145492, 121.294026715742277, 5481428.9945736388, -0.51527225545373252, -0.51556587964721788, 104679964020340.318),
]


def test_geodesic_init():
    geod = Geodesic.WGS84
    assert geod.a == 6378137.0
    assert geod.f == approx(0.0033528106647474805, rel=1e-15)
    assert geod.c2 == approx(40589732499314.76, rel=1e-14)
    assert geod.etol2 == approx(3.6424611488788524e-08, rel=1e-14)
    assert geod.area == approx(4 * math.pi * 40589732499314.76, rel=1e-14)

    assert Geodesic(6378137.0, 1 / 298.257223563).f == approx(geod.f, rel=1e-15)
    assert Geodesic.from_model('WGS84') == geod
    assert Geodesic.from_ellipsoid(Ellipsoid.WGS84) == geod
    assert Geodesic.from_model('GRS80') != geod
    assert hash(Geodesic.from_model('WGS84')) == hash(geod)

    with pytest.raises(ValueError):
        Geodesic.from_model('bogus')


def test_geodesic_repr():
    assert repr(Geodesic(6.4e6, 0.)) == '<Geodesic(a=6400000.0, f=0.0)>'


def test_geodesic_immutable():
    geod = Geodesic.WGS84
    with pytest.raises(AttributeError):
        geod.c2 = 0.

    with pytest.raises(AttributeError):
        geod.a3x = ()

    with pytest.raises(AttributeError):
        geod.extra = 1

    assert geod.c2 == approx(40589732499314.76, rel=1e-14)


def test_degenerate_ellipsoid():
    # Zero radius
    geod = Geodesic(0., 1 / 298.257223563)
    assert geod.c2 == 0.
    assert math.isnan(geod.inverse(10., 0., 20., 30.).s12)
    assert math.isnan(geod.direct(10., 0., 30., 1e6).lat2)

    # Flattening 1
    geod = Geodesic(6.4e6, 1.)
    assert math.isnan(geod.c2)
    assert math.isnan(geod.inverse(10., 0., 20., 30.).s12)
    assert math.isnan(geod.direct(10., 0., 30., 1e6).lat2)


def test_inverse_iteration_limit(monkeypatch, caplog):
    geod = Geodesic.WGS84
    expected = geod.inverse_standard(40.64, -73.78, 1.36, 103.99)

    # A single iteration cannot reach round off from the starting guess
    monkeypatch.setattr('geolines.geodesic.MAXIT1', 1)
    monkeypatch.setattr('geolines.geodesic.MAXIT2', 1)
    caplog.set_level(logging.DEBUG, logger='geolines')
    s12, azi1, azi2, a12 = geod.inverse_standard(40.64, -73.78, 1.36, 103.99)

    assert 'did not converge' in caplog.text
    assert caplog.records[-1].levelno == logging.DEBUG
    for value in (s12, azi1, azi2, a12):
        assert math.isfinite(value)

    # The best estimate is still close
    assert s12 == approx(expected[0], rel=1e-2)
    assert azi1 == approx(expected[1], abs=1.)


def test_gen_inverse():
    geod = Geodesic.WGS84
    a12, s12, salp1, calp1, salp2, calp2, m12, M12, M21, S12 = geod._gen_inverse(
        0., 0., 1., 1., Caps.STANDARD
    )
    assert a12 == approx(1.4141938478710363, rel=1e-14)
    assert s12 == approx(156899.56829134026, rel=1e-14)
    assert salp1 == approx(0.7094236375834774, rel=1e-14)
    assert calp1 == approx(0.7047823085448635, rel=1e-14)
    assert salp2 == approx(0.7095309793242709, rel=1e-14)
    assert calp2 == approx(0.7046742434480923, rel=1e-14)
    assert_all_nan(m12, M12, M21, S12)


def test_inverse_start():
    sig12, salp1, calp1, salp2, calp2, dnm = Geodesic.WGS84._inverse_start(
        -0.017393909556108908, 0.9998487145115275, 1.0000010195104125,
        -0.0, 1.0, 1.0,
        0.017453292519943295, 0.01745240643728351, 0.9998476951563913,
    )
    assert sig12 == -1.
    assert salp1 == approx(0.7095310092765433, abs=1e-13)
    assert calp1 == approx(0.7046742132893822, abs=1e-13)
    assert_all_nan(salp2, calp2)
    assert dnm == approx(1.0000002548969817, rel=1e-15)


def test_lambda12():
    geod = Geodesic.WGS84
    result = geod._lambda12(
        -0.017393909556108908, 0.9998487145115275, 1.0000010195104125,
        -0.0, 1.0, 1.0,
        0.7095310092765433, 0.7046742132893822,
        0.01745240643728351, 0.9998476951563913,
        True,
    )
    assert result == approx((
        1.4834408705897495e-09,
        0.7094236675312185,
        0.7047822783999007,
        0.024682339962725352,
        -0.024679833885152578,
        0.9996954065111039,
        -0.0,
        1.0,
        0.0008355095326524276,
        -5.8708496511415445e-05,
        0.034900275148485,
    ), rel=1e-8, abs=1e-15)

    result = geod._lambda12(
        -0.017393909556108908, 0.9998487145115275, 1.0000010195104125,
        -0.0, 1.0, 1.0,
        0.7095309793242709, 0.7046742434480923,
        0.01745240643728351, 0.9998476951563913,
        True,
    )
    assert result[0] == approx(0., abs=1e-15)
    assert result[1:] == approx((
        0.7094236375834774,
        0.7047823085448635,
        0.024682338906797385,
        -0.02467983282954624,
        0.9996954065371639,
        -0.0,
        1.0,
        0.0008355096040059597,
        -5.870849152149326e-05,
        0.03490027216297455,
    ), rel=1e-12, abs=1e-15)

    # Derivative is only computed on request
    assert math.isnan(geod._lambda12(
        -0.017393909556108908, 0.9998487145115275, 1.0000010195104125,
        -0.0, 1.0, 1.0,
        0.7095309793242709, 0.7046742434480923,
        0.01745240643728351, 0.9998476951563913,
        False,
    )[10])


def test_lengths():
    geod = Geodesic.WGS84
    s12b, m12b, m0, M12, M21 = geod._lengths(
        0.0008355095326524276, 0.024682339962725352, -0.024679833885152578,
        0.9996954065111039, 1.0000010195104125, -0.0, 1.0, 1.0,
        0.9998487145115275, 1.0, Caps.REDUCEDLENGTH,
    )
    assert m12b == approx(0.024679842274314294, rel=1e-13)
    assert m0 == approx(0.0016717180169067588, rel=1e-13)
    assert_all_nan(s12b, M12, M21)

    s12b, m12b, m0, M12, M21 = geod._lengths(
        0.0008355096040059597, 0.024682338906797385, -0.02467983282954624,
        0.9996954065371639, 1.0000010195104125, -0.0, 1.0, 1.0,
        0.9998487145115275, 1.0, Caps.STANDARD,
    )
    assert s12b == approx(0.024682347295447677, rel=1e-13)
    assert_all_nan(m12b, m0, M12, M21)

    s12b, *rest = geod._lengths(
        0.0007122620325664751, 1.405117407023628, -0.8928657853278468,
        0.45032287238256896, 1.0011366173804046, 0.2969032234925426,
        0.9549075745221299, 1.0001257451360057, 0.8139459053827204,
        0.9811634781422108, Caps.STANDARD,
    )
    assert s12b == approx(1.4056304412645388, rel=1e-13)
    assert_all_nan(*rest)


def test_inverse_testcases():
    geod = Geodesic.WGS84
    for lat1, lon1, azi1, lat2, lon2, azi2, s12, a12, m12, M12, M21, S12 in TESTCASES:
        result = geod.inverse(lat1, lon1, lat2, lon2, Caps.ALL | Caps.LONG_UNROLL)
        assert_result_fields(result, azi1=azi1, azi2=azi2, a12=a12)
        assert_result_fields(result, abs_tol=1e-12, lon2=lon2)
        assert_result_fields(result, abs_tol=1e-8, s12=s12, m12=m12)
        assert_result_fields(result, abs_tol=1e-15, M12=M12, M21=M21)
        assert_result_fields(result, abs_tol=0.1, S12=S12)


def test_direct_testcases():
    geod = Geodesic.WGS84
    for lat1, lon1, azi1, lat2, lon2, azi2, s12, a12, m12, M12, M21, S12 in TESTCASES:
        result = geod.direct(lat1, lon1, azi1, s12, Caps.ALL | Caps.LONG_UNROLL)
        assert_result_fields(result, lat2=lat2, lon2=lon2, azi2=azi2, a12=a12)
        assert_result_fields(result, abs_tol=1e-8, m12=m12)
        assert_result_fields(result, abs_tol=1e-15, M12=M12, M21=M21)
        assert_result_fields(result, abs_tol=0.1, S12=S12)
        assert result.s12 == s12


def test_arc_direct_testcases():
    geod = Geodesic.WGS84
    for lat1, lon1, azi1, lat2, lon2, azi2, s12, a12, m12, M12, M21, S12 in TESTCASES:
        result = geod.arc_direct(lat1, lon1, azi1, a12, Caps.ALL | Caps.LONG_UNROLL)
        assert_result_fields(result, lat2=lat2, lon2=lon2, azi2=azi2)
        assert_result_fields(result, abs_tol=1e-8, s12=s12, m12=m12)
        assert_result_fields(result, abs_tol=1e-15, M12=M12, M21=M21)
        assert_result_fields(result, abs_tol=0.1, S12=S12)
        assert result.a12 == a12


def test_round_trip():
    geod = Geodesic.WGS84
    for lat1, lon1, _, lat2, lon2, *_ in TESTCASES:
        s12, azi1, _, _ = geod.inverse_standard(lat1, lon1, lat2, lon2)
        lat, lon = geod.direct_lat_lon(lat1, lon1, azi1, s12)
        assert lat == approx(lat2, abs=1e-9)
        assert geod.inverse_distance(lat, lon, lat2, lon2) < 1e-6


def test_inverse_symmetry():
    geod = Geodesic.WGS84
    for lat1, lon1, _, lat2, lon2, *_ in TESTCASES[:5]:
        s12, azi1, azi2, _ = geod.inverse_standard(lat1, lon1, lat2, lon2)
        s21, azi1r, azi2r, _ = geod.inverse_standard(lat2, lon2, lat1, lon1)
        assert s21 == approx(s12, abs=1e-8)
        # Reversing the points reverses the azimuths
        assert azi1r == approx(azi2 + 180 if azi2 < 0 else azi2 - 180, abs=1e-12)
        assert azi2r == approx(azi1 + 180 if azi1 < 0 else azi1 - 180, abs=1e-12)


def test_inverse_result_fields():
    geod = Geodesic.WGS84
    result = geod.inverse(0., 0., 1., 1.)
    assert result.to_dict().keys() == {'lat1', 'lon1', 'lat2', 'lon2', 'a12', 's12', 'azi1', 'azi2'}
    assert math.isnan(result.m12)
    assert math.isnan(result.S12)

    result = geod.inverse(0., 0., 1., 1., Caps.DISTANCE)
    assert result.s12 == approx(156899.56829134026, rel=1e-14)
    assert math.isnan(result.azi1)


def test_identical_points():
    geod = Geodesic.WGS84
    s12, azi1, azi2, m12, M12, M21, S12, a12 = geod.inverse_all(20.001, 0., 20.001, 0.)
    assert s12 == 0.
    assert a12 == 0.
    assert m12 == 0.
    assert azi1 == approx(180., abs=1e-13)
    assert azi2 == approx(180., abs=1e-13)
    assert M12 == approx(1., abs=1e-15)
    assert M21 == approx(1., abs=1e-15)
    assert S12 == approx(0., abs=1e-10)


def test_typed_direct_wrappers():
    geod = Geodesic.WGS84
    lat1, lon1, azi1, lat2, lon2, azi2, s12, a12, m12, M12, M21, S12 = TESTCASES[0]

    assert geod.direct_lat_lon(lat1, lon1, azi1, s12) == approx((lat2, lon2), abs=1e-13)
    assert geod.direct_lat_lon_azi(lat1, lon1, azi1, s12) == approx(
        (lat2, lon2, azi2), abs=1e-13
    )
    assert geod.direct_reduced_length(lat1, lon1, azi1, s12) == approx(
        (lat2, lon2, azi2, m12), abs=1e-8
    )
    assert geod.direct_scales(lat1, lon1, azi1, s12) == approx(
        (lat2, lon2, azi2, M12, M21), abs=1e-13
    )
    assert geod.direct_reduced_length_scales(lat1, lon1, azi1, s12) == approx(
        (lat2, lon2, azi2, m12, M12, M21), abs=1e-8
    )
    assert geod.direct_all(lat1, lon1, azi1, s12) == approx(
        (lat2, lon2, azi2, m12, M12, M21, S12, a12), abs=0.1
    )


def test_typed_inverse_wrappers():
    geod = Geodesic.WGS84
    lat1, lon1, azi1, lat2, lon2, azi2, s12, a12, m12, M12, M21, S12 = TESTCASES[0]

    assert geod.inverse_distance(lat1, lon1, lat2, lon2) == approx(s12, abs=1e-8)
    assert geod.inverse_distance_arc(lat1, lon1, lat2, lon2) == approx((s12, a12), abs=1e-8)
    assert geod.inverse_azimuths(lat1, lon1, lat2, lon2) == approx((azi1, azi2, a12), abs=1e-13)
    assert geod.inverse_standard(lat1, lon1, lat2, lon2) == approx(
        (s12, azi1, azi2, a12), abs=1e-8
    )
    assert geod.inverse_reduced_length(lat1, lon1, lat2, lon2) == approx(
        (s12, azi1, azi2, m12, a12), abs=1e-8
    )
    assert geod.inverse_scales(lat1, lon1, lat2, lon2) == approx(
        (s12, azi1, azi2, M12, M21, a12), abs=1e-8
    )
    assert geod.inverse_reduced_length_scales(lat1, lon1, lat2, lon2) == approx(
        (s12, azi1, azi2, m12, M12, M21, a12), abs=1e-8
    )
    assert geod.inverse_all(lat1, lon1, lat2, lon2) == approx(
        (s12, azi1, azi2, m12, M12, M21, S12, a12), abs=0.1
    )


def test_turnaround():
    geod = Geodesic.WGS84
    s12, azi1, _, _ = geod.inverse_standard(0., 0., 0., 1.)
    assert azi1 == 90.

    lat, lon = geod.direct_lat_lon(0., 1., azi1 + 180, s12)
    assert lat == approx(0., abs=1e-3)
    assert lon == approx(0., abs=1e-3)


def test_geodsolve0():
    s12, azi1, azi2, _ = Geodesic.WGS84.inverse_standard(40.6, -73.8, 49.01666667, 2.55)
    assert azi1 == approx(53.47022, abs=0.5e-5)
    assert azi2 == approx(111.59367, abs=0.5e-5)
    assert s12 == approx(5853226, abs=0.5)


def test_geodsolve1():
    lat2, lon2, azi2 = Geodesic.WGS84.direct_lat_lon_azi(40.63972222, -73.77888889, 53.5, 5850e3)
    assert lat2 == approx(49.01467, abs=0.5e-5)
    assert lon2 == approx(2.56106, abs=0.5e-5)
    assert azi2 == approx(111.62947, abs=0.5e-5)


def test_geodsolve2():
    # Antipodal points on a prolate ellipsoid
    geod = Geodesic(6.4e6, -1 / 150.)
    s12, azi1, azi2, _ = geod.inverse_standard(0.07476, 0., -0.07476, 180.)
    assert azi1 == approx(90.00078, abs=0.5e-5)
    assert azi2 == approx(90.00078, abs=0.5e-5)
    assert s12 == approx(20106193, abs=0.5)

    s12, azi1, azi2, _ = geod.inverse_standard(0.1, 0., -0.1, 180.)
    assert azi1 == approx(90.00105, abs=0.5e-5)
    assert azi2 == approx(90.00105, abs=0.5e-5)
    assert s12 == approx(20106193, abs=0.5)


def test_geodsolve4():
    # Short line
    s12 = Geodesic.WGS84.inverse_distance(36.493349428792, 0., 36.49334942879201, .0000008)
    assert s12 == approx(0.072, abs=0.5e-3)


def test_geodsolve5():
    # Second point at a pole
    lat2, lon2, azi2 = Geodesic.WGS84.direct_lat_lon_azi(0.01777745589997, 30., 0., 10e6)
    assert lat2 == approx(90., abs=0.5e-5)
    if lon2 < 0:
        assert lon2 == approx(-150., abs=0.5e-5)
        assert abs(azi2) == approx(180., abs=0.5e-5)
    else:
        assert lon2 == approx(30., abs=0.5e-5)
        assert azi2 == approx(0., abs=0.5e-5)


def test_geodsolve6():
    geod = Geodesic.WGS84
    s12 = geod.inverse_distance(88.202499451857, 0., -88.202499451857, 179.981022032992859592)
    assert s12 == approx(20003898.214, abs=0.5e-3)

    s12 = geod.inverse_distance(
        89.333123580033, 0., -89.333123580032997687, 179.99295812360148422
    )
    assert s12 == approx(20003926.881, abs=0.5e-3)


def test_geodsolve9_to_11():
    geod = Geodesic.WGS84
    s12 = geod.inverse_distance(56.320923501171, 0., -56.320923501171, 179.664747671772880215)
    assert s12 == approx(19993558.287, abs=0.5e-3)

    s12 = geod.inverse_distance(
        52.784459512564, 0., -52.784459512563990912, 179.634407464943777557
    )
    assert s12 == approx(19991596.095, abs=0.5e-3)

    s12 = geod.inverse_distance(
        48.522876735459, 0., -48.52287673545898293, 179.599720456223079643
    )
    assert s12 == approx(19989144.774, abs=0.5e-3)


def test_geodsolve12():
    # Extreme prolate ellipsoid
    geod = Geodesic(89.8, -1.83)
    s12, azi1, azi2, _ = geod.inverse_standard(0., 0., -10., 160.)
    assert azi1 == approx(120.27, abs=1e-2)
    assert azi2 == approx(105.15, abs=1e-2)
    assert s12 == approx(266.7, abs=1e-1)


def test_geodsolve14():
    # A nan longitude difference
    s12, azi1, azi2, _ = Geodesic.WGS84.inverse_standard(0., 0., 1., math.nan)
    assert_all_nan(s12, azi1, azi2)


def test_geodsolve15():
    geod = Geodesic(6.4e6, -1 / 150.)
    S12 = geod.direct_all(1., 2., 3., 4.)[6]
    assert S12 == approx(23700, abs=0.5)


def test_geodsolve17():
    # Longitude unrolling
    geod = Geodesic(6.4e6, -1 / 150.)
    _, lat2, lon2, azi2, *_ = geod._gen_direct(
        40., -75., -10., False, 2e7, Caps.STANDARD | Caps.LONG_UNROLL
    )
    assert lat2 == approx(-39, abs=1)
    assert lon2 == approx(-254, abs=1)
    assert azi2 == approx(-170, abs=1)

    line = GeodesicLine(geod, 40., -75., -10.)
    result = line.position(2e7, Caps.STANDARD | Caps.LONG_UNROLL)
    assert result.lat2 == approx(-39, abs=1)
    assert result.lon2 == approx(-254, abs=1)
    assert result.azi2 == approx(-170, abs=1)

    lat2, lon2, azi2 = geod.direct_lat_lon_azi(40., -75., -10., 2e7)
    assert lat2 == approx(-39, abs=1)
    assert lon2 == approx(105, abs=1)
    assert azi2 == approx(-170, abs=1)

    result = line.position(2e7)
    assert result.lat2 == approx(-39, abs=1)
    assert result.lon2 == approx(105, abs=1)
    assert result.azi2 == approx(-170, abs=1)


def test_geodsolve26():
    # Area on a sphere
    geod = Geodesic(6.4e6, 0.)
    S12 = geod._gen_inverse(1., 2., 3., 4., Caps.AREA)[9]
    assert S12 == approx(49911046115, abs=0.5)


def test_geodsolve28():
    # a12 with |f| > 0.01
    geod = Geodesic(6.4e6, 0.1)
    a12 = geod._gen_direct(1., 2., 10., False, 5e6, Caps.STANDARD)[0]
    assert a12 == approx(48.55570690, abs=0.5e-8)


def test_geodsolve29():
    # Longitude unrolling in the inverse solution
    geod = Geodesic.WGS84
    result = geod.inverse(0., 539., 0., 181.)
    assert result.lon1 == approx(179, abs=1e-10)
    assert result.lon2 == approx(-179, abs=1e-10)
    assert result.s12 == approx(222639, abs=0.5)

    result = geod.inverse(0., 539., 0., 181., Caps.STANDARD | Caps.LONG_UNROLL)
    assert result.lon1 == approx(539, abs=1e-10)
    assert result.lon2 == approx(541, abs=1e-10)
    assert result.s12 == approx(222639, abs=0.5)


def test_geodsolve33():
    # Signed zeros on the equator
    geod = Geodesic.WGS84
    s12, azi1, azi2, _ = geod.inverse_standard(0., 0., 0., 179.)
    assert azi1 == approx(90., abs=0.5e-5)
    assert azi2 == approx(90., abs=0.5e-5)
    assert s12 == approx(19926189, abs=0.5)

    s12, azi1, azi2, _ = geod.inverse_standard(0., 0., 0., 179.5)
    assert azi1 == approx(55.96650, abs=0.5e-5)
    assert azi2 == approx(124.03350, abs=0.5e-5)
    assert s12 == approx(19980862, abs=0.5)

    s12, azi1, azi2, _ = geod.inverse_standard(0., 0., 0., 180.)
    assert azi1 == approx(0., abs=0.5e-5)
    assert abs(azi2) == approx(180., abs=0.5e-5)
    assert s12 == approx(20003931, abs=0.5)

    s12, azi1, azi2, _ = geod.inverse_standard(0., 0., 1., 180.)
    assert azi1 == approx(0., abs=0.5e-5)
    assert abs(azi2) == approx(180., abs=0.5e-5)
    assert s12 == approx(19893357, abs=0.5)

    geod = Geodesic(6.4e6, 0.)
    s12, azi1, azi2, _ = geod.inverse_standard(0., 0., 0., 179.)
    assert azi1 == approx(90., abs=0.5e-5)
    assert azi2 == approx(90., abs=0.5e-5)
    assert s12 == approx(19994492, abs=0.5)

    s12, azi1, azi2, _ = geod.inverse_standard(0., 0., 0., 180.)
    assert azi1 == approx(0., abs=0.5e-5)
    assert abs(azi2) == approx(180., abs=0.5e-5)
    assert s12 == approx(20106193, abs=0.5)

    s12, azi1, azi2, _ = geod.inverse_standard(0., 0., 1., 180.)
    assert azi1 == approx(0., abs=0.5e-5)
    assert abs(azi2) == approx(180., abs=0.5e-5)
    assert s12 == approx(19994492, abs=0.5)

    geod = Geodesic(6.4e6, -1 / 300.)
    s12, azi1, azi2, _ = geod.inverse_standard(0., 0., 0., 179.)
    assert azi1 == approx(90., abs=0.5e-5)
    assert azi2 == approx(90., abs=0.5e-5)
    assert s12 == approx(19994492, abs=0.5)

    s12, azi1, azi2, _ = geod.inverse_standard(0., 0., 0., 180.)
    assert azi1 == approx(90., abs=0.5e-5)
    assert azi2 == approx(90., abs=0.5e-5)
    assert s12 == approx(20106193, abs=0.5)

    s12, azi1, azi2, _ = geod.inverse_standard(0., 0., 0.5, 180.)
    assert azi1 == approx(33.02493, abs=0.5e-5)
    assert azi2 == approx(146.97364, abs=0.5e-5)
    assert s12 == approx(20082617, abs=0.5)

    s12, azi1, azi2, _ = geod.inverse_standard(0., 0., 1., 180.)
    assert azi1 == approx(0., abs=0.5e-5)
    assert abs(azi2) == approx(180., abs=0.5e-5)
    assert s12 == approx(20027270, abs=0.5)


def test_geodsolve55():
    # nan with a point on the equator or at a pole
    geod = Geodesic.WGS84
    s12, azi1, azi2, _ = geod.inverse_standard(math.nan, 0., 0., 90.)
    assert_all_nan(s12, azi1, azi2)

    s12, azi1, azi2, _ = geod.inverse_standard(math.nan, 0., 90., 3.)
    assert_all_nan(s12, azi1, azi2)


def test_geodsolve59():
    # Points close to 180 degrees of longitude apart
    s12, azi1, azi2, _ = Geodesic.WGS84.inverse_standard(5., 0.00000000000001, 10., 180.)
    assert azi1 == approx(0.000000000000035, abs=1.5e-14)
    assert azi2 == approx(179.99999999999996, abs=1.5e-14)
    assert s12 == approx(18345191.174332713, abs=5e-9)


def test_geodsolve61():
    # Small negative azimuths are west-going
    geod = Geodesic.WGS84
    _, lat2, lon2, azi2, *_ = geod._gen_direct(
        45., 0., -0.000000000000000003, False, 1e7, Caps.STANDARD | Caps.LONG_UNROLL
    )
    assert lat2 == approx(45.30632, abs=0.5e-5)
    assert lon2 == approx(-180, abs=0.5e-5)
    assert abs(azi2) == approx(180, abs=0.5e-5)

    line = geod.inverse_line(45., 0., 80., -0.000000000000000003)
    result = line.position(1e7, Caps.STANDARD | Caps.LONG_UNROLL)
    assert result.lat2 == approx(45.30632, abs=0.5e-5)
    assert result.lon2 == approx(-180, abs=0.5e-5)
    assert abs(result.azi2) == approx(180, abs=0.5e-5)


def test_geodsolve65():
    # East-going check on an inverse line
    line = Geodesic.WGS84.inverse_line(30., -0.000000000000000001, -31., 180., Caps.ALL)
    result = line.position(1e7, Caps.ALL | Caps.LONG_UNROLL)
    assert result.lat1 == approx(30., abs=0.5e-5)
    assert result.lon1 == approx(0., abs=0.5e-5)
    assert abs(result.azi1) == approx(180., abs=0.5e-5)
    assert result.lat2 == approx(-60.23169, abs=0.5e-5)
    assert result.lon2 == approx(0., abs=0.5e-5)
    assert abs(result.azi2) == approx(180., abs=0.5e-5)
    assert result.s12 == approx(10000000, abs=0.5)
    assert result.a12 == approx(90.06544, abs=0.5e-5)
    assert result.m12 == approx(6363636, abs=0.5)

    result = line.position(2e7, Caps.ALL | Caps.LONG_UNROLL)
    assert result.lat2 == approx(-30.03547, abs=0.5e-5)
    assert result.lon2 == approx(-180., abs=0.5e-5)
    assert result.azi2 == approx(0., abs=0.5e-5)
    assert result.s12 == approx(20000000, abs=0.5)
    assert result.a12 == approx(179.96459, abs=0.5e-5)
    assert result.m12 == approx(54342, abs=0.5)


def test_geodsolve71():
    # direct_line sets the reference distance
    line = Geodesic.WGS84.direct_line(1., 2., 45., 1e7)
    result = line.position(0.5 * line.s13, Caps.STANDARD | Caps.LONG_UNROLL)
    assert result.lat2 == approx(30.92625, abs=0.5e-5)
    assert result.lon2 == approx(37.54640, abs=0.5e-5)
    assert result.azi2 == approx(55.43104, abs=0.5e-5)


def test_geodsolve73():
    # Backwards from the pole
    lat2, lon2, azi2 = Geodesic.WGS84.direct_lat_lon_azi(90., 10., 180., -1e6)
    assert lat2 == approx(81.04623, abs=0.5e-5)
    assert lon2 == approx(-170, abs=0.5e-5)
    assert azi2 == approx(0, abs=0.5e-5)
    assert math.copysign(1, azi2) == 1


def test_geodsolve74():
    # Accurate areas for short lines
    result = Geodesic.WGS84.inverse(54.1589, 15.3872, 54.1591, 15.3877, Caps.ALL)
    assert_result_fields(
        result,
        abs_tol=5e-9,
        azi1=55.723110355,
        azi2=55.723515675,
        s12=39.527686385,
        a12=0.000355495,
        m12=39.527686385,
        M12=0.999999995,
        M21=0.999999995,
    )
    assert result.S12 == approx(286698586.30197, abs=5e-4)


def test_geodsolve76():
    # Wellington to Salamanca
    s12, azi1, azi2, _ = Geodesic.WGS84.inverse_standard(
        -(41 + 19 / 60.), 174 + 49 / 60., 40 + 58 / 60., -(5 + 30 / 60.)
    )
    assert azi1 == approx(160.39137649664, abs=0.5e-11)
    assert azi2 == approx(19.50042925176, abs=0.5e-11)
    assert s12 == approx(19960543.857179, abs=0.5e-6)


def test_geodsolve78():
    s12, azi1, azi2, _ = Geodesic.WGS84.inverse_standard(27.2, 0., -27.1, 179.5)
    assert azi1 == approx(45.82468716758, abs=0.5e-11)
    assert azi2 == approx(134.22776532670, abs=0.5e-11)
    assert s12 == approx(19974354.765767, abs=0.5e-6)


def test_geodsolve80():
    # Scales in special cases and zero length geodesics
    geod = Geodesic.WGS84
    *_, M12, M21, _ = geod._gen_inverse(0., 0., 0., 90., Caps.GEODESICSCALE)
    assert M12 == approx(-0.00528427534, abs=0.5e-10)
    assert M21 == approx(-0.00528427534, abs=0.5e-10)

    *_, M12, M21, _ = geod._gen_inverse(0., 0., 1e-6, 1e-6, Caps.GEODESICSCALE)
    assert M12 == approx(1, abs=0.5e-10)
    assert M21 == approx(1, abs=0.5e-10)

    result = geod.inverse(90., 0., 90., 180., Caps.ALL)
    assert result.a12 == approx(0, abs=1e-13)
    assert result.s12 == approx(0, abs=1e-8)
    assert result.azi1 == approx(0, abs=1e-13)
    assert result.azi2 == approx(180, abs=1e-13)
    assert result.m12 == approx(0, abs=1e-8)
    assert result.M12 == approx(1, abs=1e-15)
    assert result.M21 == approx(1, abs=1e-15)
    assert result.S12 == approx(127516405431022.0, abs=0.5)

    # A line which cannot take a distance as input
    line = GeodesicLine(geod, 1., 2., 90., Caps.LATITUDE)
    assert math.isnan(line._gen_position(False, 1000., Caps.EMPTY)[0])
    assert math.isnan(line.position(1000.).a12)
    assert math.isnan(line.position(1000.).s12)


def test_geodsolve84():
    # Non-finite input
    geod = Geodesic.WGS84
    assert_all_nan(*geod.direct_lat_lon_azi(0., 0., 90., math.inf))
    assert_all_nan(*geod.direct_lat_lon_azi(0., 0., 90., math.nan))
    assert_all_nan(*geod.direct_lat_lon_azi(0., 0., math.inf, 1000.))
    assert_all_nan(*geod.direct_lat_lon_azi(0., 0., math.nan, 1000.))
    assert_all_nan(*geod.direct_lat_lon_azi(math.inf, 0., 90., 1000.))
    assert_all_nan(*geod.direct_lat_lon_azi(math.nan, 0., 90., 1000.))

    lat2, lon2, azi2 = geod.direct_lat_lon_azi(0., math.inf, 90., 1000.)
    assert lat2 == 0.
    assert math.isnan(lon2)
    assert azi2 == 90.

    lat2, lon2, azi2 = geod.direct_lat_lon_azi(0., math.nan, 90., 1000.)
    assert lat2 == 0.
    assert math.isnan(lon2)
    assert azi2 == 90.

    result = geod.direct(0., 0., 90., math.inf, Caps.ALL)
    assert_all_nan(
        result.lat2, result.lon2, result.azi2, result.m12, result.M12, result.M21,
        result.S12, result.a12,
    )
