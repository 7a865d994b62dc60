"""
Database seeding.

Populates an empty joke store exactly once; a non-empty store is left alone.
"""

from typing import Sequence

from comedy_club.models.joke import JokeInput
from comedy_club.repositories.joke_repository import JokeRepository
from comedy_club.utils.logger import get_logger

logger = get_logger(__name__)

_SEED_PAIRS = [
    ("What did the container say to the other container?", "You are always so full of yourself!"),
    ("Why did the container go to the party?", "Because it was a great way to package itself!"),
    ("What do you call a container that is always making jokes?", "A box of laughs!"),
    ("Why did the container fail at school?", "It just couldn't contain its excitement for the next subject!"),
    ("What do you call a container that loves to sing?", "A note-worthy box!"),
    ("Why did the container always get invited to the cookouts?", "Because it was great at keeping things fresh!"),
    ("Why was the container so good at math?", "It was always able to compute what it contained!"),
    ("What's a container's favorite type of music?", "Anything with a good track record!"),
    ("Why was the container nervous?", "Because it was worried it would be shipped off!"),
    ("What did the box say to the bottle?", "You always seem to have things bottled up!"),
    ("Why did the container join the gym?", "To get some solid exercise!"),
    ("Why did the container break up with the jar?", "Because it could not handle the pressure!"),
    ("What did one container say to the other on a road trip?", "I think we are going to need more storage space!"),
    ("What is a container favorite exercise?", "Stacking!"),
    ("Why was the container so calm?", "It knew how to keep its contents cool."),
    ("How do containers handle stress?", "They contain themselves!"),
    ("What did the container say at the comedy club?", "I'm just here to contain the laughs!"),
    ("Why didn't the container go to the beach?", "It didn't want to get too packed!"),
    ("What's a container's favorite board game?", "Clue, they love solving the mystery of what's inside!"),
    ("What's the container's favorite type of holiday?", "Shipping day!"),
    ("Why did the container get a promotion?", "Because it was always packed with potential!"),
    ("Why did the container bring a flashlight?", "It didn't want to get lost in storage!"),
    ("What do you call a container with great fashion?", "A stylish storage solution!"),
    ("Why was the container so good at solving puzzles?", "It had a knack for fitting things together!"),
    ("What did the container say to the delivery truck?", "Let's roll, I've got stuff to do!"),
    ("What's a container's favorite TV show?", "Storage Wars!"),
    ("Why do containers make terrible secret agents?", "Because they're always leaking information!"),
    ("What did the container say after a workout?", "I'm feeling boxed out!"),
    ("Why did the container feel so successful?", "It always knew how to package itself for success!"),
    ("What do containers talk about at parties?", "The best ways to store their secrets!"),
    ("Why did the container refuse to leave the store?", "It was afraid of being shipped out!"),
    ("Why did the Docker container go to therapy?", "It had too many layers to unpack!"),
    ("What do you call a Docker container that tells jokes?", "A comic-tainer!"),
    ("Why did the MongoDB database break up with the container?", "It needed more space to scale!"),
    ("What's a container's favorite dance move?", "The Docker shuffle!"),
    ("Why don't containers ever get lost?", "They always know their port!"),
    ("What did the Redis cache say to the slow database?", "I'll just store that for you... in a flash!"),
    ("Why was the container always happy?", "Because it lived a containerized life!"),
    ("What do you call a container that loves music?", "A Docker Beats!"),
    ("Why did the microservice join the comedy club?", "To improve its container-to-container communication!"),
]

DEFAULT_JOKES: tuple[JokeInput, ...] = tuple(
    JokeInput(setup=setup, punchline=punchline) for setup, punchline in _SEED_PAIRS
)


async def seed_database(
    store: JokeRepository, jokes: Sequence[JokeInput] = DEFAULT_JOKES
) -> int:
    """
    Seed the store if it is empty.

    Args:
        store: Joke store
        jokes: Jokes to insert into an empty store

    Returns:
        Number of jokes inserted, 0 when the store already had data
    """
    count = await store.count_all()
    inserted = 0

    if count == 0:
        logger.info("Seeding database with jokes", count=len(jokes))
        inserted = await store.insert_many(jokes)
        logger.info("Jokes inserted", inserted=inserted)
    else:
        logger.info("Database already seeded, skipping", existing=count)

    await store.ensure_indexes()
    return inserted
