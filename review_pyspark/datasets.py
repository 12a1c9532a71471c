# example data
## the sparklyr notes use nycflights13::flights, Lahman::Batting, mtcars and the million song dataset
## here every frame is generated locally with a fixed seed so the examples (and the tests) always see the same rows
import io

import numpy as np
import pandas as pd
from faker import Faker

CARRIERS = ["AA", "B6", "DL", "EV", "MQ", "UA", "US", "WN"]
AIRPORTS = ["EWR", "JFK", "LGA"]
DESTINATIONS = ["ATL", "BOS", "CLT", "DEN", "DFW", "LAX", "MCO", "MIA", "ORD", "SFO"]
TEAMS = ["BOS", "CHN", "DET", "NYA", "PHI", "SLN"]
TIMBRE_COLUMNS = [f"timbre_means{i}" for i in range(1, 13)]

MTCARS_CSV = """model,mpg,cyl,disp,hp,drat,wt,qsec,vs,am,gear,carb
Mazda RX4,21.0,6,160.0,110,3.90,2.620,16.46,0,1,4,4
Mazda RX4 Wag,21.0,6,160.0,110,3.90,2.875,17.02,0,1,4,4
Datsun 710,22.8,4,108.0,93,3.85,2.320,18.61,1,1,4,1
Hornet 4 Drive,21.4,6,258.0,110,3.08,3.215,19.44,1,0,3,1
Hornet Sportabout,18.7,8,360.0,175,3.15,3.440,17.02,0,0,3,2
Valiant,18.1,6,225.0,105,2.76,3.460,20.22,1,0,3,1
Duster 360,14.3,8,360.0,245,3.21,3.570,15.84,0,0,3,4
Merc 240D,24.4,4,146.7,62,3.69,3.190,20.00,1,0,4,2
Merc 230,22.8,4,140.8,95,3.92,3.150,22.90,1,0,4,2
Merc 280,19.2,6,167.6,123,3.92,3.440,18.30,1,0,4,4
Merc 280C,17.8,6,167.6,123,3.92,3.440,18.90,1,0,4,4
Merc 450SE,16.4,8,275.8,180,3.07,4.070,17.40,0,0,3,3
Merc 450SL,17.3,8,275.8,180,3.07,3.730,17.60,0,0,3,3
Merc 450SLC,15.2,8,275.8,180,3.07,3.780,18.00,0,0,3,3
Cadillac Fleetwood,10.4,8,472.0,205,2.93,5.250,17.98,0,0,3,4
Lincoln Continental,10.4,8,460.0,215,3.00,5.424,17.82,0,0,3,4
Chrysler Imperial,14.7,8,440.0,230,3.23,5.345,17.42,0,0,3,4
Fiat 128,32.4,4,78.7,66,4.08,2.200,19.47,1,1,4,1
Honda Civic,30.4,4,75.7,52,4.93,1.615,18.52,1,1,4,2
Toyota Corolla,33.9,4,71.1,65,4.22,1.835,19.90,1,1,4,1
Toyota Corona,21.5,4,120.1,97,3.70,2.465,20.01,1,0,3,1
Dodge Challenger,15.5,8,318.0,150,2.76,3.520,16.87,0,0,3,2
AMC Javelin,15.2,8,304.0,150,3.15,3.435,17.30,0,0,3,2
Camaro Z28,13.3,8,350.0,245,3.73,3.840,15.41,0,0,3,4
Pontiac Firebird,19.2,8,400.0,175,3.08,3.845,17.05,0,0,3,2
Fiat X1-9,27.3,4,79.0,66,4.08,1.935,18.90,1,1,4,1
Porsche 914-2,26.0,4,120.3,91,4.43,2.140,16.70,0,1,5,2
Lotus Europa,30.4,4,95.1,113,3.77,1.513,16.90,1,1,5,2
Ford Pantera L,15.8,8,351.0,264,4.22,3.170,14.50,0,1,5,4
Ferrari Dino,19.7,6,145.0,175,3.62,2.770,15.50,0,1,5,6
Maserati Bora,15.0,8,301.0,335,3.54,3.570,14.60,0,1,5,8
Volvo 142E,21.4,4,121.0,109,4.11,2.780,18.60,1,1,4,2
"""


def _faker(seed):
    fake = Faker()
    fake.seed_instance(seed)
    return fake


def _track_ids(n):
    return [f"TR{i:016X}" for i in range(n)]


def track_metadata(n=1000, seed=42) -> pd.DataFrame:
    rng = np.random.default_rng(seed)
    fake = _faker(seed)
    ## a few hundred artists with several tracks each, so grouping by artist is meaningful
    n_artists = max(1, n // 4)
    artists = [fake.name() for _ in range(n_artists)]
    artist_familiarity = rng.uniform(0.2, 1.0, n_artists)
    artist_hotttnesss = np.clip(artist_familiarity * rng.uniform(0.4, 0.9, n_artists), 0, 1)
    artist_idx = rng.integers(0, n_artists, n)
    return pd.DataFrame({
        "track_id": _track_ids(n),
        "title": [fake.sentence(nb_words=3).rstrip(".") for _ in range(n)],
        "song_id": [f"SO{i:016X}" for i in range(n)],
        "release": [fake.catch_phrase() for _ in range(n)],
        "artist_id": [f"AR{i:016X}" for i in artist_idx],
        "artist_mbid": [fake.uuid4() for _ in range(n)],
        "artist_name": [artists[i] for i in artist_idx],
        "duration": np.round(rng.gamma(9.0, 28.0, n) + 30.0, 3),
        "artist_familiarity": np.round(artist_familiarity[artist_idx], 6),
        "artist_hotttnesss": np.round(artist_hotttnesss[artist_idx], 6),
        "year": rng.integers(1927, 2011, n),
    })


def timbre(n=1000, seed=42) -> pd.DataFrame:
    rng = np.random.default_rng(seed)
    means = rng.normal(0.0, 1.0, (n, len(TIMBRE_COLUMNS)))
    weights = np.linspace(6.0, -3.0, len(TIMBRE_COLUMNS))
    year = 1980.0 + means @ weights + rng.normal(0.0, 2.0, n)
    frame = pd.DataFrame(np.round(means * 10.0, 4), columns=TIMBRE_COLUMNS)
    frame.insert(0, "year", np.clip(np.round(year), 1922, 2011).astype("int64"))
    frame.insert(0, "track_id", _track_ids(n))
    return frame


def flights(n=2000, seed=42) -> pd.DataFrame:
    rng = np.random.default_rng(seed)
    tailnums = [f"N{rng.integers(100, 999)}{c}" for c in "ABCDEFGHJKLMNPQRSTUVWXYZ" for _ in range(4)]
    distance = rng.integers(180, 2600, n)
    dep_delay = np.round(rng.exponential(15.0, n) - 8.0).astype("int64")
    return pd.DataFrame({
        "year": np.full(n, 2013),
        "month": rng.integers(1, 13, n),
        "day": rng.integers(1, 29, n),
        "dep_delay": dep_delay,
        "arr_delay": dep_delay + np.round(rng.normal(-4.0, 12.0, n)).astype("int64"),
        "carrier": rng.choice(CARRIERS, n),
        "tailnum": rng.choice(tailnums, n),
        "origin": rng.choice(AIRPORTS, n),
        "dest": rng.choice(DESTINATIONS, n),
        "air_time": np.round(distance / 8.0 + rng.normal(0.0, 10.0, n)).astype("int64"),
        "distance": distance,
        "hour": rng.integers(5, 23, n),
    })


def batting(n_players=150, seed=42) -> pd.DataFrame:
    rng = np.random.default_rng(seed)
    fake = _faker(seed)
    rows = []
    for number in range(n_players):
        player = f"{fake.last_name().lower()[:5]}{fake.first_name().lower()[:2]}{number:03d}"
        first_year = int(rng.integers(1960, 2010))
        for year in range(first_year, first_year + int(rng.integers(1, 8))):
            games = int(rng.integers(1, 163))
            at_bats = int(rng.integers(0, games * 4 + 1))
            hits = int(rng.binomial(at_bats, 0.26))
            rows.append({
                "playerID": player,
                "yearID": year,
                "teamID": str(rng.choice(TEAMS)),
                "G": games,
                "AB": at_bats,
                "R": int(rng.binomial(hits, 0.45)) if hits else 0,
                "H": hits,
            })
    return pd.DataFrame(rows)


def mtcars() -> pd.DataFrame:
    return pd.read_csv(io.StringIO(MTCARS_CSV))
