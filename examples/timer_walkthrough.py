# examples/timer_walkthrough.py

"""
Walks a Timer through its states and then measures a small workload with
repeat(), showing that preparation done in pre_function is not counted.
"""

import time

from timebench import InvalidStateError, Timer


def main():
    print("\n--- Timer State Machine ---")
    timer = Timer()
    print(f"New timer:           {timer}")

    timer.resume()
    time.sleep(0.002)
    timer.pause_and_lap()
    print(f"After one lap:       {timer}")
    print(f"Mean lap time:       {timer.mean_lap_time():.3f} ms")

    timer.resume()
    try:
        timer.resume()
    except InvalidStateError as e:
        print(f"Expected failure:    {e}")
    timer.pause()
    print(f"After pause():       {timer} (no extra lap)")

    print("\n--- repeat() with untimed preparation ---")
    data = list(range(20_000, 0, -1))

    def slow_copy(a):
        time.sleep(0.005)  # untimed
        return list(a)

    mean = Timer().repeat(10, lambda: data, lambda a: a.sort(), slow_copy)
    print(f"Mean sort time:      {mean:.3f} ms (the 5 ms copy is excluded)")


if __name__ == "__main__":
    main()
