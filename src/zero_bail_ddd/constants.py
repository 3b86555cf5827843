"""Fixed lookup tables for the zero-bail tutorial panel."""

COUNTIES = (
    "Alameda", "Alpine", "Amador", "Butte", "Calaveras", "Colusa",
    "Contra Costa", "Del Norte", "El Dorado", "Fresno", "Glenn", "Humboldt",
    "Imperial", "Inyo", "Kern", "Kings", "Lake", "Lassen", "Los Angeles",
    "Madera", "Marin", "Mariposa", "Mendocino", "Merced", "Modoc", "Mono",
    "Monterey", "Napa", "Nevada", "Orange", "Placer", "Plumas", "Riverside",
    "Sacramento", "San Benito", "San Bernardino", "San Diego",
    "San Francisco", "San Joaquin", "San Luis Obispo", "San Mateo",
    "Santa Barbara", "Santa Clara", "Santa Cruz", "Shasta", "Sierra",
    "Siskiyou", "Solano", "Sonoma", "Stanislaus", "Sutter", "Tehama",
    "Trinity", "Tulare", "Tuolumne", "Ventura", "Yolo", "Yuba",
)

# Counties that kept an emergency zero-bail schedule after the statewide
# rule was rescinded on 2020-06-20.
TREATED_COUNTIES = (
    "Alameda", "Butte", "Contra Costa", "Del Norte", "El Dorado", "Fresno",
    "Humboldt", "Kern", "Los Angeles", "Marin", "Mendocino", "Merced",
    "Monterey", "Napa", "Riverside", "Sacramento", "San Bernardino",
    "San Diego", "San Francisco", "San Joaquin", "San Mateo", "Santa Clara",
    "Santa Cruz", "Solano", "Sonoma", "Ventura", "Yolo",
)

OFFENSE_CATEGORIES = ("drugs", "other", "property", "violent")
RACES = ("Asian", "Black", "Hispanic", "Other", "White")
GENDERS = ("Female", "Male")

# Key tuple that fixes panel row order (and therefore the random draw order)
KEY_COLUMNS = ["county", "week", "zb_eligible", "offense_category", "race", "gender"]
