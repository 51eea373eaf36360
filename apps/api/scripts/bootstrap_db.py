"""Create database schema and seed sample listings for development."""
from __future__ import annotations

import asyncio
from datetime import datetime, timedelta, timezone

from haven_api.db.session import SessionLocal, init_models
from haven_api.models.property import ListingStatus, Property, PropertyType

PROPERTIES = [
	{
		"id": "prop-austin-bungalow",
		"title": "Renovated Bungalow near South Congress",
		"description": "Light-filled three bedroom bungalow with a shaded backyard and updated kitchen.",
		"price": 585_000,
		"city": "Austin",
		"state": "TX",
		"address": "1408 Eva St",
		"bedrooms": 3,
		"bathrooms": 2,
		"square_feet": 1650,
		"property_type": PropertyType.HOUSE,
		"image_url": "https://picsum.photos/seed/eva1408/800/600",
	},
	{
		"id": "prop-north-austin-condo",
		"title": "Domain-adjacent Condo with Pool Access",
		"description": "Two bedroom condo steps from shopping, with covered parking and a resort-style pool.",
		"price": 339_000,
		"city": "North Austin",
		"state": "TX",
		"address": "11400 Domain Dr #412",
		"bedrooms": 2,
		"bathrooms": 2,
		"square_feet": 1080,
		"property_type": PropertyType.CONDO,
		"image_url": "https://picsum.photos/seed/domain412/800/600",
	},
	{
		"id": "prop-houston-townhouse",
		"title": "Montrose Townhouse with Rooftop Deck",
		"description": "Three story townhouse with a private rooftop deck and two-car garage.",
		"price": 612_500,
		"city": "Houston",
		"state": "TX",
		"address": "902 Hawthorne St",
		"bedrooms": 3,
		"bathrooms": 3.5,
		"square_feet": 2240,
		"property_type": PropertyType.TOWNHOUSE,
		"image_url": "https://picsum.photos/seed/hawthorne902/800/600",
	},
	{
		"id": "prop-denver-studio",
		"title": "LoDo Studio Loft",
		"description": "Exposed brick studio loft a short walk from Union Station.",
		"price": 265_000,
		"city": "Denver",
		"state": "CO",
		"address": "1801 Wynkoop St #305",
		"bedrooms": 0,
		"bathrooms": 1,
		"square_feet": 610,
		"property_type": PropertyType.STUDIO,
		"image_url": None,
		"listing_status": ListingStatus.SOLD,
	},
]


async def seed_properties() -> None:
	"""Insert or update demo listings."""

	now = datetime.now(timezone.utc)
	async with SessionLocal() as session:
		async with session.begin():
			for offset, data in enumerate(PROPERTIES):
				values = {key: value for key, value in data.items() if key != "id"}
				values.setdefault("listing_status", ListingStatus.ACTIVE)
				values.setdefault("country", "USA")

				listing = await session.get(Property, data["id"])
				if listing is None:
					listing = Property(id=data["id"], created_at=now - timedelta(days=offset), **values)
					session.add(listing)
				else:
					for key, value in values.items():
						setattr(listing, key, value)


async def main() -> None:
	await init_models()
	await seed_properties()
	print("Database schema ensured and demo listings seeded.")


if __name__ == "__main__":
	asyncio.run(main())
