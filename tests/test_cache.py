from BizPlan_V1.core.cache import ResultsCache, plan_fingerprint


def test_unchanged_plan_is_served_from_cache(simple_plan):
    cache = ResultsCache()

    first = cache.get(simple_plan)
    second = cache.get(simple_plan.model_copy(deep=True))

    assert second is first
    assert (cache.hits, cache.misses) == (1, 1)


def test_edited_plan_is_recomputed(simple_plan):
    cache = ResultsCache()
    edited = simple_plan.model_copy(update={"turnover_growth_rate": 5})

    first = cache.get(simple_plan)
    second = cache.get(edited)

    assert plan_fingerprint(simple_plan) != plan_fingerprint(edited)
    assert second is not first
    assert second.years[1].turnover > first.years[1].turnover
    assert cache.misses == 2


def test_oldest_entry_is_evicted(simple_plan):
    cache = ResultsCache(max_entries=2)
    plans = [
        simple_plan.model_copy(update={"discount_rate": rate}) for rate in (5, 8, 12)
    ]

    for plan in plans:
        cache.get(plan)

    assert len(cache) == 2
    cache.get(plans[0])
    assert cache.misses == 4

    cache.clear()
    assert len(cache) == 0
