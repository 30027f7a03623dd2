"""Seed content: tours, their child collections and public read permissions."""

PUBLIC_READ_PERMISSIONS = {
    "tour": ["find", "findOne"],
    "tour-highlight": ["find", "findOne"],
    "tour-inclusion": ["find", "findOne"],
    "tour-itinerary": ["find", "findOne"],
}

RUN_THE_RANGES_SLUG = "run-the-ranges"

RUN_THE_RANGES_HERO = ["beautiful-picture.jpg"]
RUN_THE_RANGES_GALLERY = [
    "coffee-art.jpg",
    "coffee-beans.jpg",
    "coffee-shadow.jpg",
]

RUN_THE_RANGES = {
    "title": "Run the Ranges",
    "slug": RUN_THE_RANGES_SLUG,
    "location": "Mid Canterbury",
    "duration": "3 days / 2 nights",
    "groupSize": "8-14",
    "difficulty": "Level 2",
    "price": "from $995NZD",
    "distance": "36-43km total",
    "elevation": "850m+",
    "status": "published",
    "featured": True,
    "showButton": True,
    "showPrice": True,
    "shortDescription": "• 3-Day Trail Running Escape\n• Level 2",
    "description": (
        "The Traverse team invites you deep into the Southern Alps for a three-day trail running "
        "adventure through some of New Zealand's most breathtaking alpine landscapes.\n\n"
        "Explore winding mountain trails and take in sweeping high country views at an easygoing "
        "pace. Each day brings fresh air, shared stories, and unforgettable moments topped off "
        "with the welcoming touch of Kiwi hospitality.\n\n"
        "This trip isn't just about running - it's about connecting: to the land, to High Country "
        "life, and to a small, like-minded crew of runners. Just pack your trail gear - we'll take "
        "care of the rest."
    ),
    "metaTitle": "Run the Ranges - 3-Day Trail Running Adventure in Mid Canterbury",
    "metaDescription": (
        "Join Traverse for a 3-day trail running adventure in the Southern Alps. Experience "
        "breathtaking alpine landscapes, connect with like-minded runners, and enjoy authentic "
        "Kiwi hospitality."
    ),
}

RUN_THE_RANGES_HIGHLIGHTS = [
    "Three-day trail running adventure in the Southern Alps",
    "Experience panoramic alpine views and mountain landscapes",
    "Connect with like-minded runners in small groups",
    "Enjoy authentic Kiwi hospitality in high-country station",
    "Discover winding mountain tracks and hidden trails",
]

RUN_THE_RANGES_INCLUSIONS = [
    "2 nights twin or triple share accommodation with ensuite",
    "All meals included (except breakfast Day 1 and dinner Day 3)",
    "Guided runs with experienced trail leaders",
    "Group stretching session",
    "On-trail snacks and support",
]

RUN_THE_RANGES_ITINERARY = [
    {
        "day": "Day 1 - Friday",
        "description": (
            "Meet at our high country base by 12pm for a welcome lunch and orientation "
            "with your Traverse hosts."
        ),
        "run": "8-10km - 150m+ elevation",
        "meals": "Lunch, Dinner",
        "order": 1,
    },
    {
        "day": "Day 2 - Saturday",
        "description": "Full day of trail running through alpine landscapes with panoramic views.",
        "run": "18-21km - 450m+ elevation",
        "meals": "Breakfast, Lunch, Dinner",
        "order": 2,
    },
    {
        "day": "Day 3 - Sunday",
        "description": "Morning run followed by departure after lunch.",
        "run": "10-12km - 250m+ elevation",
        "meals": "Breakfast, Lunch",
        "order": 3,
    },
]

# Coming-soon tours: (hero image file, tour fields)
COMING_SOON_TOURS = [
    (
        "what-s-inside-a-black-hole.jpg",
        {
            "title": "Ben Lomond and Beyond",
            "slug": "ben-lomond-beyond",
            "location": "Otago",
            "duration": "3 days / 2 nights",
            "groupSize": "8-14",
            "difficulty": "Level 2",
            "price": "from $1095NZD",
            "distance": "TBA",
            "elevation": "TBA",
            "status": "coming_soon",
            "featured": False,
            "showButton": False,
            "showPrice": False,
            "shortDescription": "• 3-Day Trail Running Journey\n• Level 2\n\nCOMING SOON",
            "description": "Coming soon - an exciting trail running adventure in the Otago region.",
            "metaTitle": "Ben Lomond and Beyond - Coming Soon",
            "metaDescription": "Coming soon - an exciting trail running adventure in the Otago region.",
        },
    ),
    (
        "the-internet-s-own-boy.jpg",
        {
            "title": "Ridge Runner",
            "slug": "ridge-runner",
            "location": "North Canterbury",
            "duration": "2 days / 2 nights",
            "groupSize": "8-14",
            "difficulty": "Level 2",
            "price": "from $1095NZD",
            "distance": "TBA",
            "elevation": "TBA",
            "status": "coming_soon",
            "featured": False,
            "showButton": False,
            "showPrice": False,
            "shortDescription": "• 2-Night Trail Running Weekend\n• Level 2\n\nCOMING SOON",
            "description": "Coming soon - a weekend trail running adventure in North Canterbury.",
            "metaTitle": "Ridge Runner - Coming Soon",
            "metaDescription": "Coming soon - a weekend trail running adventure in North Canterbury.",
        },
    ),
]

ALL_MEDIA_FILES = (
    RUN_THE_RANGES_HERO
    + RUN_THE_RANGES_GALLERY
    + [file_name for file_name, _ in COMING_SOON_TOURS]
)
