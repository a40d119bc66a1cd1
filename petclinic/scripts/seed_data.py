"""Module: seed_data.

Loads the clinic's reference data (pet types, specialties, vets) plus a set
of sample owners. Reference rows that already exist are left alone, so the
script can be re-run against a live database.

    python -m petclinic.scripts.seed_data --fake-owners 20
"""

import argparse
import random
from datetime import date, timedelta

from faker import Faker
from sqlalchemy import func, select
from sqlalchemy.orm import Session

from petclinic.core.config import get_settings
from petclinic.core.logging import configure_logging, get_logger
from petclinic.db.init_db import init_db
from petclinic.db.models.owner import OwnerRow
from petclinic.db.models.vet import VetRow
from petclinic.db.session import build_engine, build_session_factory
from petclinic.domain.owners import Owner, PersonName, Pet, PetType, Visit
from petclinic.domain.vets import Specialty, Vet
from petclinic.repositories.owner_repository import OwnerRepository
from petclinic.repositories.pet_type_repository import PetTypeRepository
from petclinic.repositories.vet_repository import VetRepository

logger = get_logger(__name__)

PET_TYPES = ["cat", "dog", "lizard", "snake", "bird", "hamster"]
SPECIALTIES = ["radiology", "surgery", "dentistry"]

VETS = [
    ("James", "Carter", []),
    ("Helen", "Leary", ["radiology"]),
    ("Linda", "Douglas", ["surgery", "dentistry"]),
    ("Rafael", "Ortega", ["surgery"]),
    ("Henry", "Stevens", ["radiology"]),
    ("Sharon", "Jenkins", []),
]

# (first, last, address, city, telephone, [(pet name, type, birth date, [(visit date, description)])])
OWNERS = [
    ("George", "Franklin", "110 W. Liberty St.", "Madison", "6085551023", [("Leo", "cat", "2010-09-07", [])]),
    ("Betty", "Davis", "638 Cardinal Ave.", "Sun Prairie", "6085551749", [("Basil", "hamster", "2012-08-06", [])]),
    ("Eduardo", "Rodriquez", "2693 Commerce St.", "McFarland", "6085558763",
     [("Jewel", "dog", "2010-03-07", []), ("Rosy", "dog", "2011-04-17", [])]),
    ("Harold", "Davis", "563 Friendly St.", "Windsor", "6085553198", [("Iggy", "lizard", "2010-11-30", [])]),
    ("Peter", "McTavish", "2387 S. Fair Way", "Madison", "6085552765", [("George", "snake", "2010-01-20", [])]),
    ("Jean", "Coleman", "105 N. Lake St.", "Monona", "6085552654",
     [("Samantha", "cat", "2012-09-04", [("2013-01-01", "rabies shot"), ("2013-01-04", "spayed")]),
      ("Max", "cat", "2012-09-04", [("2013-01-02", "rabies shot"), ("2013-01-03", "neutered")])]),
    ("Jeff", "Black", "1450 Oak Blvd.", "Monona", "6085555387", [("Lucky", "bird", "2011-08-06", [])]),
    ("Maria", "Escobito", "345 Maple St.", "Madison", "6085557683", [("Mulligan", "dog", "2007-02-24", [])]),
    ("David", "Schroeder", "2749 Blackhawk Trail", "Madison", "6085559435", [("Freddy", "bird", "2010-03-09", [])]),
    ("Carlos", "Estaban", "2335 Independence La.", "Waunakee", "6085555487",
     [("Lucky", "dog", "2010-06-24", []), ("Sly", "cat", "2012-06-08", [])]),
]

fake = Faker()


def seed_reference_data(db: Session) -> dict[str, PetType]:
    type_repo = PetTypeRepository(db)
    types = {t.name: t for t in type_repo.find_all_ordered_by_name()}
    for name in PET_TYPES:
        if name not in types:
            types[name] = type_repo.save(PetType(name))

    if db.execute(select(func.count(VetRow.id))).scalar_one() == 0:
        vet_repo = VetRepository(db)
        specialties = {name: Specialty(name) for name in SPECIALTIES}
        for first, last, spec_names in VETS:
            vet_repo.save(Vet(name=PersonName(first, last), specialties=[specialties[s] for s in spec_names]))
        logger.info("vets_seeded", count=len(VETS))
    return types


def seed_owners(db: Session, types: dict[str, PetType]) -> None:
    if db.execute(select(func.count(OwnerRow.id))).scalar_one() > 0:
        logger.info("owners_already_present")
        return
    repo = OwnerRepository(db)
    for first, last, address, city, telephone, pets in OWNERS:
        owner = Owner(name=PersonName(first, last), address=address, city=city, telephone=telephone)
        for pet_name, type_name, birth, visits in pets:
            pet = Pet(name=pet_name, birth_date=date.fromisoformat(birth), type=types[type_name])
            for visit_date, description in visits:
                pet.add_visit(Visit(description=description, date=date.fromisoformat(visit_date)))
            owner.add_pet(pet)
        repo.save(owner)
    logger.info("owners_seeded", count=len(OWNERS))


def generate_telephone() -> str:
    return "".join(random.choice("0123456789") for _ in range(10))


def seed_fake_owners(db: Session, types: dict[str, PetType], count: int) -> None:
    repo = OwnerRepository(db)
    type_list = list(types.values())
    for _ in range(count):
        owner = Owner(
            name=PersonName(fake.first_name(), fake.last_name()),
            address=fake.street_address(),
            city=fake.city(),
            telephone=generate_telephone(),
        )
        used_names: set[str] = set()
        for _ in range(random.randint(0, 3)):
            pet_name = fake.first_name()
            if pet_name.lower() in used_names:
                continue
            used_names.add(pet_name.lower())
            pet = Pet(
                name=pet_name,
                birth_date=date.today() - timedelta(days=random.randint(30, 15 * 365)),
                type=random.choice(type_list),
            )
            for _ in range(random.randint(0, 2)):
                pet.add_visit(Visit(description=fake.sentence(nb_words=3), date=fake.date_between("-2y", "today")))
            owner.add_pet(pet)
        repo.save(owner)
    logger.info("fake_owners_seeded", count=count)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Seed the pet clinic database.")
    parser.add_argument("--fake-owners", type=int, default=0, help="extra owners generated with Faker")
    args = parser.parse_args(argv)

    settings = get_settings()
    configure_logging(settings)
    engine = build_engine(settings.database_url)
    init_db(engine)

    db = build_session_factory(engine)()
    try:
        types = seed_reference_data(db)
        seed_owners(db, types)
        if args.fake_owners:
            seed_fake_owners(db, types, args.fake_owners)
    finally:
        db.close()


if __name__ == "__main__":
    main()
