"""
Sample Trend Dataset

Writes a synthetic social media export with fashion and non-fashion
posts for demonstration purposes. The output is reproducible for a
given seed.
"""

import csv
import random
from pathlib import Path

PLATFORMS = ["TikTok", "Instagram", "Pinterest", "YouTube", "X", "Threads"]

FASHION_TOPICS = [
    ("Cottagecore linen dress haul", "Womenswear", ["cottagecore", "linen", "ootd"]),
    ("Y2K low-rise pants are back", "Womenswear", ["y2k", "throwback", "denim"]),
    ("Thrift flip: vintage blazer to crop jacket", "Upcycling", ["thrift", "vintage", "diy"]),
    ("Minimalist capsule wardrobe for autumn", "Capsule", ["minimalist", "capsule", "autumn"]),
    ("Streetwear sneakers rotation", "Footwear", ["streetwear", "sneakers", "hype"]),
    ("Grunge flannel shirt styling", "Menswear", ["grunge", "flannel", "90s"]),
    ("Quiet luxury handbag dupes", "Accessories", ["quietluxury", "handbag", "dupes"]),
    ("Slow fashion brands worth knowing", "Sustainability", ["slowfashion", "sustainable", "ethical"]),
    ("Preppy tennis skirt outfit ideas", "Womenswear", ["preppy", "tennis", "ootd"]),
    ("Gothic jewelry stack tutorial", "Accessories", ["gothic", "jewelry", "silver"]),
    ("Bohemian festival lookbook", "Festival", ["bohemian", "festival", "lookbook"]),
    ("Clean girl makeup and slick hair", "Beauty", ["cleangirl", "makeup", "hair"]),
]

OTHER_TOPICS = [
    ("Sourdough starter day 5", "Food", ["baking", "sourdough"]),
    ("Morning run in the rain", "Fitness", ["running", "cardio"]),
    ("Budget travel in Lisbon", "Travel", ["travel", "lisbon"]),
    ("Houseplant repotting guide", "Home", ["plants", "home"]),
]

FIELDNAMES = ["title", "platform", "engagement", "category", "hashtags"]


def generate_rows(rows: int = 60, seed: int = 7):
    """Generate sample rows as dicts."""
    rng = random.Random(seed)
    data = []

    for _ in range(rows):
        if rng.random() < 0.8:
            title, category, tags = rng.choice(FASHION_TOPICS)
            engagement = round(rng.uniform(50, 25000), 1)
        else:
            title, category, tags = rng.choice(OTHER_TOPICS)
            engagement = round(rng.uniform(10, 3000), 1)

        # A few broken engagement cells, like real exports have
        roll = rng.random()
        if roll < 0.04:
            engagement = "n/a"
        elif roll < 0.07:
            engagement = 0

        data.append({
            "title": title,
            "platform": rng.choice(PLATFORMS),
            "engagement": engagement,
            "category": category,
            "hashtags": " ".join(f"#{t}" for t in rng.sample(tags, k=rng.randint(1, len(tags)))),
        })

    return data


def generate_sample_csv(path: str = "./data/fashion_trends.csv", rows: int = 60, seed: int = 7) -> str:
    """
    Create the sample CSV file.

    Args:
        path: Destination file
        rows: Number of data rows
        seed: Random seed

    Returns:
        Path of the written file
    """
    Path(path).parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=FIELDNAMES)
        writer.writeheader()
        writer.writerows(generate_rows(rows, seed))

    return path
