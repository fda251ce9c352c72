from datetime import datetime, timezone

from pyaerofly import (
    Mission,
    MissionAircraft,
    MissionCheckpoint,
    MissionConditions,
    MissionConditionsCloud,
    MissionPosition,
    MissionsList,
    MissionWind,
)

# Weather: gusty and clear early morning
conditions = MissionConditions(
    time=datetime(2024, 6, 14, 13, 15, 38, tzinfo=timezone.utc),
    wind=MissionWind(direction=190, speed=11, gusts=22),
    turbulence_strength=1,
    temperature=21,
    visibility_sm=9,
    clouds=[
        MissionConditionsCloud.create_in_feet(0.1, 5000),
        MissionConditionsCloud.create_in_feet(0.2, 7500),
    ],
)

# Flight plan: Concord / Buchanan Field to Martha's Vineyard
checkpoints = [
    MissionCheckpoint("KCCR", "origin", -122.057, 37.9897, altitude=8),
    MissionCheckpoint("19L", "departure_runway", -122.05504061196366, 37.993168229891225,
                      length=844.2959729825288),
    MissionCheckpoint("24", "destination_runway", -70.60730234370952, 41.399093035543366,
                      altitude=20, length=1677.6191463161874, frequency=108_700_000),
    MissionCheckpoint("KMVY", "destination", -70.6139, 41.3934, altitude=20, fly_over=False),
]

mission = Mission(
    "KCCR #1: Concord / Buchanan Field",
    description="Fly the pattern and land safely.",
    flight_setting="cruise",
    aircraft=MissionAircraft(name="c172", icao="C172"),
    callsign="N51911",
    origin=MissionPosition("KCCR", -122.0736009331662, 38.122300745843944, 190, 1066.799965862401),
    conditions=conditions,
    checkpoints=checkpoints,
    verbose=True,
)
mission.distance = mission.calculate_distance()

print(mission.validate().get_report())

missions_list = MissionsList([mission], verbose=True, strict=True)
output_file = missions_list.save("./out/custom_missions_user.tmc")
print(f"Missions list saved to: {output_file}")
