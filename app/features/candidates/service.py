from fastapi import HTTPException

from app.features.candidates.schemas import CandidateIn
from app.infra.repo_candidates import CandidatePolicy, CandidateRecord, CandidateRepo, PolicyRepo
from app.infra.repo_plans import PlanRepo


def candidate_to_json(c: CandidateRecord) -> dict[str, object]:
    return {
        "id": c.id,
        "name": c.name,
        "party": c.party,
        "alignment": c.alignment,
        "bio": c.bio,
        "image_url": c.image_url,
        "created_at": c.created_at,
    }


def _policy_to_json(p: CandidatePolicy) -> dict[str, object]:
    return {"id": p.id, "topic": p.topic, "stance": p.stance, "proposal": p.proposal}


class CandidatesService:
    def __init__(self, *, conn) -> None:
        self._conn = conn

    async def list_candidates(self) -> dict[str, object]:
        items = CandidateRepo(self._conn).list()
        return {"items": [candidate_to_json(c) for c in items]}

    async def get_profile(self, *, candidate_id: int) -> dict[str, object]:
        try:
            c = CandidateRepo(self._conn).get(candidate_id)
        except KeyError:
            raise HTTPException(status_code=404, detail="candidate_not_found")

        policies = PolicyRepo(self._conn).list_for_candidate(candidate_id)
        plan = PlanRepo(self._conn).latest_for_candidate(c.name)
        return {
            **candidate_to_json(c),
            "policies": [_policy_to_json(p) for p in policies],
            "electoral_plan": None
            if plan is None
            else {
                "id": plan.id,
                "summary": plan.summary,
                "topics": plan.topics,
                "proposals": plan.proposals,
                "updated_at": plan.updated_at,
            },
        }

    async def create(self, *, body: CandidateIn) -> dict[str, object]:
        c = CandidateRepo(self._conn).create(
            name=body.name,
            party=body.party,
            alignment=body.alignment.value,
            bio=body.bio,
            image_url=str(body.image_url) if body.image_url else None,
        )
        PolicyRepo(self._conn).replace_for_candidate(
            c.id, [(p.topic, p.stance, p.proposal) for p in body.policies]
        )
        return await self.get_profile(candidate_id=c.id)

    async def update(self, *, candidate_id: int, body: CandidateIn) -> dict[str, object]:
        try:
            CandidateRepo(self._conn).update(
                candidate_id,
                name=body.name,
                party=body.party,
                alignment=body.alignment.value,
                bio=body.bio,
                image_url=str(body.image_url) if body.image_url else None,
            )
        except KeyError:
            raise HTTPException(status_code=404, detail="candidate_not_found")
        PolicyRepo(self._conn).replace_for_candidate(
            candidate_id, [(p.topic, p.stance, p.proposal) for p in body.policies]
        )
        return await self.get_profile(candidate_id=candidate_id)

    async def delete(self, *, candidate_id: int) -> dict[str, object]:
        try:
            CandidateRepo(self._conn).delete(candidate_id)
        except KeyError:
            raise HTTPException(status_code=404, detail="candidate_not_found")
        return {"id": candidate_id, "deleted": True}
