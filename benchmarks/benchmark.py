from pyinstrument import Profiler
from sequenced import OrderedMap, OrderedSequence, OrderedSet

N = 200_000


def churn_sequence():
    seq = OrderedSequence()
    for i in range(N):
        if i % 2:
            seq.add_first(i)
        else:
            seq.add_last(i)
    view = seq.reversed()
    while view:
        view.remove_first()
        if view:
            view.remove_last()


def churn_set():
    s = OrderedSet(range(N))
    for i in range(N):
        s.add_first(i)  # all duplicates
    while s:
        s.remove_last()


def churn_map():
    m = OrderedMap((i, str(i)) for i in range(N))
    for i in range(0, N, 2):
        m.put_first(i, str(-i))
    total = sum(1 for _ in m.reversed().ordered_values())
    assert total == N
    while m:
        m.poll_first_entry()


def benchmark_containers():
    profiler = Profiler()
    profiler.start()

    print(f"Starting churn ({N} elements per container)...")
    churn_sequence()
    churn_set()
    churn_map()
    print("Churn finished.")

    profiler.stop()

    profiler.print()

    # Optional: save to HTML
    with open("containers_profile.html", "w") as f:
        f.write(profiler.output_html())

if __name__ == "__main__":
    benchmark_containers()
