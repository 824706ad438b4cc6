# Default question set written on first start when the store file is absent.
# Answers are numeric strings; tolerance is an absolute margin.

SEED_QUESTIONS = [
    {
        "id": 1,
        "title": "Beam Deflection Analysis",
        "category": "Mechanical",
        "difficulty": "Medium",
        "description": (
            "A simply supported beam of length 10m carries a uniformly distributed load of "
            "5 kN/m. The beam has a Young's modulus of 200 GPa and a moment of inertia of "
            "8.5×10⁻⁶ m⁴."
        ),
        "question": "Calculate the maximum deflection of the beam in millimeters.",
        "givenInfo": [
            "Length (L) = 10 m",
            "Load (w) = 5 kN/m = 5000 N/m",
            "Young's Modulus (E) = 200 GPa = 200×10⁹ Pa",
            "Moment of Inertia (I) = 8.5×10⁻⁶ m⁴",
        ],
        "formula": "δ_max = (5wL⁴)/(384EI)",
        "answer": "15.28",
        "unit": "mm",
        "tolerance": 0.5,
        "completed": False,
    },
    {
        "id": 2,
        "title": "Rocket Thrust Calculation",
        "category": "Aerospace",
        "difficulty": "Hard",
        "description": (
            "A rocket engine expels exhaust gases at a velocity of 3000 m/s relative to the "
            "rocket. The mass flow rate of the exhaust is 150 kg/s."
        ),
        "question": "Calculate the thrust produced by the rocket engine in kilonewtons (kN).",
        "givenInfo": [
            "Exhaust velocity (v_e) = 3000 m/s",
            "Mass flow rate (ṁ) = 150 kg/s",
        ],
        "formula": "F = ṁ × v_e",
        "answer": "450",
        "unit": "kN",
        "tolerance": 1,
        "completed": False,
    },
    {
        "id": 3,
        "title": "Heat Transfer Through Wall",
        "category": "Thermodynamics",
        "difficulty": "Easy",
        "description": (
            "A brick wall 0.3m thick has an area of 20m². The temperature on one side is "
            "80°C and on the other side is 20°C. The thermal conductivity of brick is "
            "0.7 W/(m·K)."
        ),
        "question": "Calculate the rate of heat transfer through the wall in kilowatts (kW).",
        "givenInfo": [
            "Thickness (L) = 0.3 m",
            "Area (A) = 20 m²",
            "Temperature difference (ΔT) = 80 - 20 = 60°C",
            "Thermal conductivity (k) = 0.7 W/(m·K)",
        ],
        "formula": "Q = (k × A × ΔT) / L",
        "answer": "2.8",
        "unit": "kW",
        "tolerance": 0.1,
        "completed": False,
    },
    {
        "id": 4,
        "title": "Spring Constant Calculation",
        "category": "Mechanical",
        "difficulty": "Easy",
        "description": "A spring is compressed by 0.15m when a force of 450N is applied to it.",
        "question": "Calculate the spring constant in N/m.",
        "givenInfo": [
            "Force (F) = 450 N",
            "Displacement (x) = 0.15 m",
        ],
        "formula": "k = F / x",
        "answer": "3000",
        "unit": "N/m",
        "tolerance": 10,
        "completed": False,
    },
    {
        "id": 5,
        "title": "Pressure in Fluid Column",
        "category": "Fluid Mechanics",
        "difficulty": "Medium",
        "description": (
            "A vertical column of water has a height of 25m. Calculate the pressure at the "
            "bottom of the column due to the water alone (not including atmospheric "
            "pressure). Density of water is 1000 kg/m³ and g = 9.81 m/s²."
        ),
        "question": "Calculate the pressure in kilopascals (kPa).",
        "givenInfo": [
            "Height (h) = 25 m",
            "Density (ρ) = 1000 kg/m³",
            "Gravity (g) = 9.81 m/s²",
        ],
        "formula": "P = ρ × g × h",
        "answer": "245.25",
        "unit": "kPa",
        "tolerance": 1,
        "completed": False,
    },
]
