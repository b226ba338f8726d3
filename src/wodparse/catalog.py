"""Default movement catalog with common aliases."""

from .movements import MovementEntry

DEFAULT_MOVEMENTS = [
    # Weightlifting
    MovementEntry(canonical_name="thruster", display_name="Thrusters", category="weightlifting"),
    MovementEntry(
        canonical_name="deadlift", display_name="Deadlift", category="weightlifting", aliases=["DL"]
    ),
    MovementEntry(
        canonical_name="sumo_deadlift_high_pull",
        display_name="Sumo Deadlift High Pull",
        category="weightlifting",
        aliases=["SDHP"],
    ),
    MovementEntry(canonical_name="back_squat", display_name="Back Squat", category="weightlifting"),
    MovementEntry(
        canonical_name="front_squat", display_name="Front Squat", category="weightlifting", aliases=["FS"]
    ),
    MovementEntry(
        canonical_name="overhead_squat",
        display_name="Overhead Squat",
        category="weightlifting",
        aliases=["OHS"],
    ),
    MovementEntry(canonical_name="clean", display_name="Clean", category="weightlifting"),
    MovementEntry(
        canonical_name="power_clean", display_name="Power Clean", category="weightlifting", aliases=["PC"]
    ),
    MovementEntry(canonical_name="squat_clean", display_name="Squat Clean", category="weightlifting"),
    MovementEntry(
        canonical_name="hang_power_clean",
        display_name="Hang Power Clean",
        category="weightlifting",
        aliases=["HPC"],
    ),
    MovementEntry(
        canonical_name="clean_and_jerk",
        display_name="Clean and Jerk",
        category="weightlifting",
        aliases=["C&J", "CJ", "Clean & Jerk"],
    ),
    MovementEntry(canonical_name="snatch", display_name="Snatch", category="weightlifting"),
    MovementEntry(
        canonical_name="power_snatch", display_name="Power Snatch", category="weightlifting", aliases=["PS"]
    ),
    MovementEntry(
        canonical_name="dumbbell_snatch",
        display_name="Dumbbell Snatch",
        category="weightlifting",
        aliases=["DB Snatch", "DB Snatches"],
    ),
    MovementEntry(
        canonical_name="shoulder_press",
        display_name="Shoulder Press",
        category="weightlifting",
        aliases=["Strict Press", "Press"],
    ),
    MovementEntry(
        canonical_name="push_press", display_name="Push Press", category="weightlifting", aliases=["PP"]
    ),
    MovementEntry(canonical_name="push_jerk", display_name="Push Jerk", category="weightlifting"),
    MovementEntry(
        canonical_name="shoulder_to_overhead",
        display_name="Shoulder-to-Overhead",
        category="weightlifting",
        aliases=["STOH", "S2OH"],
    ),
    MovementEntry(
        canonical_name="ground_to_overhead",
        display_name="Ground-to-Overhead",
        category="weightlifting",
        aliases=["GTOH", "G2OH"],
    ),
    MovementEntry(canonical_name="bench_press", display_name="Bench Press", category="weightlifting"),
    MovementEntry(
        canonical_name="kettlebell_swing",
        display_name="Kettlebell Swings",
        category="weightlifting",
        aliases=["KB Swing", "KBS", "American Kettlebell Swing", "Russian Kettlebell Swing"],
    ),
    MovementEntry(
        canonical_name="wall_ball",
        display_name="Wall Balls",
        category="weightlifting",
        aliases=["Wall Ball Shot", "WB", "WBS"],
    ),
    MovementEntry(
        canonical_name="dumbbell_thruster",
        display_name="Dumbbell Thrusters",
        category="weightlifting",
        aliases=["DB Thruster"],
    ),
    MovementEntry(canonical_name="lunge", display_name="Lunges", category="weightlifting"),
    # Gymnastics
    MovementEntry(
        canonical_name="pull_up",
        display_name="Pull-ups",
        category="gymnastics",
        aliases=["Pullup", "Kipping Pull-up"],
        is_bodyweight=True,
    ),
    MovementEntry(
        canonical_name="strict_pull_up",
        display_name="Strict Pull-ups",
        category="gymnastics",
        is_bodyweight=True,
    ),
    MovementEntry(
        canonical_name="chest_to_bar_pull_up",
        display_name="Chest-to-Bar Pull-ups",
        category="gymnastics",
        aliases=["C2B", "CTB", "Chest to Bar"],
        is_bodyweight=True,
    ),
    MovementEntry(
        canonical_name="push_up",
        display_name="Push-ups",
        category="gymnastics",
        aliases=["Pushup", "Press-up"],
        is_bodyweight=True,
    ),
    MovementEntry(
        canonical_name="handstand_push_up",
        display_name="Handstand Push-ups",
        category="gymnastics",
        aliases=["HSPU", "Strict HSPU", "Kipping HSPU"],
        is_bodyweight=True,
    ),
    MovementEntry(
        canonical_name="air_squat",
        display_name="Air Squats",
        category="gymnastics",
        aliases=["Squat", "Bodyweight Squat"],
        is_bodyweight=True,
    ),
    MovementEntry(
        canonical_name="sit_up",
        display_name="Sit-ups",
        category="gymnastics",
        aliases=["Situp", "AbMat Sit-up"],
        is_bodyweight=True,
    ),
    MovementEntry(
        canonical_name="ghd_sit_up", display_name="GHD Sit-ups", category="gymnastics", is_bodyweight=True
    ),
    MovementEntry(
        canonical_name="toes_to_bar",
        display_name="Toes-to-Bar",
        category="gymnastics",
        aliases=["T2B", "TTB"],
        is_bodyweight=True,
    ),
    MovementEntry(
        canonical_name="knees_to_elbow",
        display_name="Knees-to-Elbows",
        category="gymnastics",
        aliases=["K2E", "KTE"],
        is_bodyweight=True,
    ),
    MovementEntry(
        canonical_name="muscle_up",
        display_name="Muscle-ups",
        category="gymnastics",
        aliases=["Ring Muscle-up", "RMU", "MU"],
        is_bodyweight=True,
    ),
    MovementEntry(
        canonical_name="bar_muscle_up",
        display_name="Bar Muscle-ups",
        category="gymnastics",
        aliases=["BMU"],
        is_bodyweight=True,
    ),
    MovementEntry(
        canonical_name="burpee", display_name="Burpees", category="gymnastics", is_bodyweight=True
    ),
    MovementEntry(
        canonical_name="bar_facing_burpee",
        display_name="Bar-facing Burpees",
        category="gymnastics",
        aliases=["BFB"],
        is_bodyweight=True,
    ),
    MovementEntry(
        canonical_name="burpee_box_jump_over",
        display_name="Burpee Box Jump Overs",
        category="gymnastics",
        aliases=["BBJO"],
        is_bodyweight=True,
    ),
    MovementEntry(
        canonical_name="box_jump", display_name="Box Jumps", category="gymnastics", aliases=["BJ"], is_bodyweight=True
    ),
    MovementEntry(
        canonical_name="box_jump_over", display_name="Box Jump Overs", category="gymnastics", is_bodyweight=True
    ),
    MovementEntry(
        canonical_name="pistol", display_name="Pistols", category="gymnastics", aliases=["Pistol Squat"], is_bodyweight=True
    ),
    MovementEntry(
        canonical_name="ring_dip", display_name="Ring Dips", category="gymnastics", is_bodyweight=True
    ),
    MovementEntry(
        canonical_name="rope_climb", display_name="Rope Climbs", category="gymnastics", is_bodyweight=True
    ),
    MovementEntry(
        canonical_name="handstand_walk", display_name="Handstand Walk", category="gymnastics", aliases=["HSW"], is_bodyweight=True
    ),
    MovementEntry(
        canonical_name="walking_lunge", display_name="Walking Lunges", category="gymnastics", is_bodyweight=True
    ),
    MovementEntry(
        canonical_name="back_extension", display_name="Back Extensions", category="gymnastics", is_bodyweight=True
    ),
    # Cardio
    MovementEntry(
        canonical_name="double_under",
        display_name="Double Unders",
        category="cardio",
        aliases=["DU", "DUs", "Double-Under"],
        is_bodyweight=True,
    ),
    MovementEntry(
        canonical_name="single_under", display_name="Single Unders", category="cardio", aliases=["SU"], is_bodyweight=True
    ),
    MovementEntry(canonical_name="run", display_name="Run", category="cardio", aliases=["Running"], is_bodyweight=True),
    MovementEntry(canonical_name="row", display_name="Row", category="cardio", aliases=["Rowing", "Erg"]),
    MovementEntry(
        canonical_name="bike", display_name="Bike", category="cardio", aliases=["Assault Bike", "Echo Bike", "AD"]
    ),
    MovementEntry(canonical_name="ski_erg", display_name="Ski Erg", category="cardio", aliases=["Ski"]),
    # Strongman
    MovementEntry(canonical_name="farmers_carry", display_name="Farmers Carry", category="strongman", aliases=["Farmer Carry", "Farmers Walk"]),
    MovementEntry(canonical_name="sled_push", display_name="Sled Push", category="strongman"),
    MovementEntry(canonical_name="sandbag_carry", display_name="Sandbag Carry", category="strongman"),
]
