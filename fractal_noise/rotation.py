# fractal_noise/rotation.py

"""
================================================================================
ROTATION TABLES
================================================================================
Fixed coefficient matrices applied between octaves by the ridged and spiral
combinators, one per dimensionality. Row k produces output coordinate k as the
dot product of that row with the input coordinates.

The ridged matrices scale by roughly 2 and the spiral matrices by roughly 1.
The two families are close to a factor of two apart but not exactly, so both
are kept as literal coefficients.
================================================================================
"""

# 1D ridged noise has no rotation; it only doubles the coordinate.
RIDGED_ROTATIONS = {
    1: ((2.0,),),
    2: (
        (1.2177771028694522, -1.5887107017244124),
        (1.5887107017244124, 1.2177771028694522),
    ),
    3: (
        (0.0455933781512065, 1.3525830280287148, -1.4748009351700182),
        (0.4990618052029940, 1.4206960424763455, 1.3184441863413694),
        (1.9360777567940484, -0.3981021362528052, -0.3051528925976716),
    ),
    4: (
        (1.1398957056225543, 1.4739673704437810, -0.0651657751649546, -0.7279951762210809),
        (0.3104564696103886, 0.3541904673086399, -1.4195405035410726, 1.3301834308050966),
        (0.0967666742124671, 0.6248218912084650, 1.3896915919212955, 1.2939036600287370),
        (1.6128632630881223, -1.1475815770875697, 0.2359691782831236, 0.1808748830005391),
    ),
    5: (
        (0.3048255869843786, -0.5173420704407916, -0.9783652087284301, 1.5326625150259003, -0.5858178384102464),
        (-0.1432972100009157, -1.0167657436507067, -1.1693016659786330, -0.6484681403936172, 1.0800686529646464),
        (1.0782248261184848, 0.9274402331455114, -0.0536899150695553, 0.5611260003032422, 1.2943233881193341),
        (-0.9817181486047388, -0.6318381319813766, 0.9736361690555960, 0.9467788303110056, 0.8984912575213958),
        (1.3313094912752996, -1.2057169074227243, 0.8578895321182090, -0.1764018279775676, -0.1352153710440993),
    ),
    6: (
        (-0.1701964633576885, 0.1242822979306125, 1.2847685871601510, 1.0945564660492137, -1.0362145759662182, -0.2274130252076388),
        (0.2161121164303102, -0.6509341112786780, -0.7944584666874760, 0.1928761680964432, -1.1636562057453446, 1.2364546761012907),
        (0.5009786614647755, -0.7732938331796537, -0.4693294340745284, 1.4749319186466194, 0.8515657192249211, -0.2213632656862364),
        (0.1981716747353363, 0.8081895230329228, 0.6025468483109641, 0.3040227287451918, 0.8073960992805446, 1.4881403997147349),
        (-1.5440835162380466, -1.0530302567711793, 0.3991450762772062, -0.0929193427627107, 0.4373022528257036, 0.3981924582079757),
        (1.1212273759528033, -1.1036247824581010, 0.9995114347046243, -0.7111705838963747, 0.1462330361969127, 0.1120904158135210),
    ),
}

SPIRAL_ROTATIONS = {
    2: (
        (0.6088885514347261, -0.7943553508622062),
        (0.7943553508622062, 0.6088885514347261),
    ),
    3: (
        (0.0227966890756033, 0.6762915140143574, -0.7374004675850091),
        (0.2495309026014970, 0.7103480212381728, 0.6592220931706847),
        (0.9680388783970242, -0.1990510681264026, -0.1525764462988358),
    ),
    4: (
        (0.5699478528112771, 0.7369836852218905, -0.0325828875824773, -0.3639975881105405),
        (0.1552282348051943, 0.1770952336543200, -0.7097702517705363, 0.6650917154025483),
        (0.0483833371062336, 0.3124109456042325, 0.6948457959606478, 0.6469518300143685),
        (0.8064316315440612, -0.5737907885437848, 0.1179845891415618, 0.0904374415002696),
    ),
    5: (
        (0.1524127934921893, -0.2586710352203958, -0.4891826043642151, 0.7663312575129502, -0.2929089192051232),
        (-0.0716486050004579, -0.5083828718253534, -0.5846508329893165, -0.3242340701968086, 0.5400343264823232),
        (0.5391124130592424, 0.4637201165727557, -0.0268449575347777, 0.2805630001516211, 0.6471616940596671),
        (-0.4908590743023694, -0.3159190659906883, 0.4868180845277980, 0.4733894151555028, 0.4492456287606979),
        (0.6656547456376498, -0.6028584537113622, 0.4289447660591045, -0.0882009139887838, -0.0676076855220496),
    ),
    6: (
        (-0.0850982316788443, 0.0621411489653063, 0.6423842935800755, 0.5472782330246069, -0.5181072879831091, -0.1137065126038194),
        (0.1080560582151551, -0.3254670556393390, -0.3972292333437380, 0.0964380840482216, -0.5818281028726723, 0.6182273380506453),
        (0.2504893307323878, -0.3866469165898269, -0.2346647170372642, 0.7374659593233097, 0.4257828596124605, -0.1106816328431182),
        (0.0990858373676681, 0.4040947615164614, 0.3012734241554820, 0.1520113643725959, 0.4036980496402723, 0.7440701998573674),
        (-0.7720417581190233, -0.5265151283855897, 0.1995725381386031, -0.0464596713813553, 0.2186511264128518, 0.1990962291039879),
        (0.5606136879764017, -0.5518123912290505, 0.4997557173523122, -0.3555852919481873, 0.0731165180984564, 0.0560452079067605),
    ),
}


def rotate(matrix, coords) -> list:
    """Multiplies a coordinate vector by one of the tables above."""
    return [sum(coefficient * c for coefficient, c in zip(row, coords)) for row in matrix]
