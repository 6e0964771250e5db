from datetime import date

from codecamp import mapping, models
from codecamp.schemas import CampModel, SpeakerModel, TalkModel


def _camp_model(**overrides):
    values = dict(
        name="New Camp", moniker="NEW1", event_date=date(2024, 6, 1), length=2,
        venue="Hall A", location_address1="1 First St", location_city_town="Springfield",
        location_state_province="IL", location_postal_code="62701", location_country="USA",
    )
    values.update(overrides)
    return CampModel(**values)


def test_camp_round_trip_preserves_client_fields():
    model = _camp_model()
    back = mapping.camp_to_model(mapping.model_to_camp(model))
    assert back.model_dump() == model.model_dump()


def test_camp_location_is_flattened():
    camp = models.Camp(name="C", moniker="C1", event_date=date(2020, 1, 1))
    camp.location = models.Location(venue_name="Arena", country="NZ")
    model = mapping.camp_to_model(camp)
    assert model.venue == "Arena"
    assert model.location_country == "NZ"
    assert model.location_address1 is None
    assert model.talks == []


def test_camp_without_location_maps_to_empty_address():
    camp = models.Camp(name="C", moniker="C1", event_date=date(2020, 1, 1))
    model = mapping.camp_to_model(camp)
    assert model.venue is None


def test_apply_camp_model_overwrites_existing_entity():
    camp = mapping.model_to_camp(_camp_model())
    location = camp.location
    mapping.apply_camp_model(_camp_model(name="Renamed", venue=None, length=5), camp)
    assert camp.name == "Renamed"
    assert camp.length == 5
    assert camp.location is location
    assert location.venue_name is None


def test_talk_round_trip_ignores_server_assigned_fields():
    model = TalkModel(talk_id=42, title="Intro", abstract="An introduction to the topic at hand.", level=200,
                      speaker=SpeakerModel(speaker_id=7))
    talk = mapping.model_to_talk(model)
    assert talk.id is None
    assert talk.speaker is None
    back = mapping.talk_to_model(talk)
    assert (back.title, back.abstract, back.level) == (model.title, model.abstract, model.level)


def test_talk_to_model_embeds_speaker():
    speaker = models.Speaker(id=3, first_name="Ada", last_name="Lovelace", twitter="ada")
    talk = models.Talk(id=9, title="Engines", abstract="Analytical engines and their uses.", level=300, speaker=speaker)
    model = mapping.talk_to_model(talk)
    assert model.talk_id == 9
    assert model.speaker.speaker_id == 3
    assert model.speaker.first_name == "Ada"
    assert mapping.talk_to_model(talk, include_speaker=False).speaker is None


def test_wire_names_are_camel_case():
    dumped = mapping.camp_to_model(mapping.model_to_camp(_camp_model())).model_dump(by_alias=True)
    assert "eventDate" in dumped
    assert "locationAddress1" in dumped
    assert "event_date" not in dumped


def test_stored_rows_outside_input_constraints_still_map():
    camp = models.Camp(name="Legacy", moniker="OLD1", event_date=date(2010, 1, 1), length=0)
    talk = models.Talk(id=1, title="Old", abstract="short", level=50)
    camp.talks = [talk]
    model = mapping.camp_to_model(camp, include_talks=True)
    assert model.length == 0
    assert model.talks[0].abstract == "short"
    assert model.talks[0].level == 50
